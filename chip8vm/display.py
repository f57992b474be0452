import numpy as np
import numpy.typing as npt

from .constants import HEIGHT, WIDTH


class Display:
    """64x32 monochrome frame buffer, indexed screen[y][x]."""

    def __init__(self) -> None:
        self.screen = np.zeros((HEIGHT, WIDTH), dtype=bool)
        self.dirty = False

    def blit(self, x: int, y: int, graphic_data: npt.NDArray[np.uint8]) -> bool:
        """XOR a sprite onto the screen, wrapping in both directions.

        Returns True when any pixel was switched from on to off.
        """
        x %= WIDTH
        y %= HEIGHT
        columns = (x + np.arange(8)) % WIDTH
        erased = False
        for i, b in enumerate(graphic_data):
            bits = np.unpackbits(np.asarray([b], dtype=np.uint8)).astype(bool)
            if not bits.any():
                continue
            y_coord = (y + i) % HEIGHT
            before = self.screen[y_coord, columns]
            erased |= bool((before & bits).any())
            self.screen[y_coord, columns] = before ^ bits
            self.dirty = True
        return erased

    def clear(self) -> None:
        self.screen[:, :] = False
        self.dirty = True

    def snapshot(self) -> npt.NDArray[np.bool_]:
        """Read-only copy of the current screen."""
        screen = self.screen.copy()
        screen.setflags(write=False)
        return screen

    def __str__(self) -> str:
        lines = ["+" + "".join("█" if e else " " for e in row) + "+" for row in self.screen]
        top_bot = ["+" * len(lines[0])]
        return "\n".join(top_bot + lines + top_bot)
