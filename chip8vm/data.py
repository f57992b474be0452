from pathlib import Path

import numpy as np
import numpy.typing as npt

from .errors import RomNotFound

# 4x5 hex digit sprites, one byte per row, high nibble used
FONT_DATA = np.asarray(
    [
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    ],
    dtype=np.uint8,
)


def read_rom(rom_file: Path) -> npt.NDArray[np.uint8]:
    """Read a raw program image from disk. No header, loaded verbatim."""
    try:
        rom_data = Path(rom_file).read_bytes()
    except FileNotFoundError as e:
        raise RomNotFound(rom_file) from e
    return np.frombuffer(rom_data, dtype=np.uint8)
