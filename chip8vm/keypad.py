from .constants import NUM_KEYS


class Keypad:
    """State of the 16 hex keys, written by the host and read by the CPU."""

    def __init__(self) -> None:
        self.pressed = [False] * NUM_KEYS
        self.last_press: int | None = None

    def set_key_state(self, code: int, pressed: bool) -> None:
        if not 0 <= code < NUM_KEYS:
            raise ValueError(f"Key code must be in 0x0-0xF, got {code}")
        if pressed and not self.pressed[code] and self.last_press is None:
            self.last_press = code
        self.pressed[code] = pressed

    def is_pressed(self, code: int) -> bool:
        return self.pressed[code & 0xF]

    def clear_press(self) -> None:
        """Forget any press seen so far, only later presses count as fresh."""
        self.last_press = None

    def take_press(self) -> int | None:
        """Consume the first key pressed since the last clear, if any."""
        code = self.last_press
        self.last_press = None
        return code
