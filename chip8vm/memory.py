import logging

import numpy as np
import numpy.typing as npt

from .constants import MAX_ROM_SIZE, MEMORY_SIZE, MEMORY_START_FONT, MEMORY_START_ROM
from .data import FONT_DATA
from .errors import AddressOutOfRange, RomTooLarge


class Memory:
    def __init__(self) -> None:
        self.memory = np.zeros(MEMORY_SIZE, dtype=np.uint8)
        self.load_fonts()

    def load_fonts(self) -> None:
        font_data = FONT_DATA
        self.memory[MEMORY_START_FONT : MEMORY_START_FONT + len(font_data)] = font_data

    def load_program(self, rom_data: bytes | bytearray | npt.NDArray[np.uint8]) -> None:
        if len(rom_data) > MAX_ROM_SIZE:
            raise RomTooLarge(len(rom_data), MAX_ROM_SIZE)
        program = np.frombuffer(bytes(rom_data), dtype=np.uint8)
        self.memory[MEMORY_START_ROM : MEMORY_START_ROM + len(program)] = program
        logging.info("Loaded %d byte program at 0x%03X", len(program), MEMORY_START_ROM)

    def read_byte(self, address: int) -> int:
        self.check_address(address)
        return int(self.memory[address])

    def write_byte(self, address: int, value: int) -> None:
        self.check_address(address)
        self.memory[address] = value & 0xFF

    def read_word(self, address: int) -> int:
        """Big-endian 16 bit fetch, used for instructions."""
        high, low = self.read_bytes(address, 2)
        return int(high) << 8 | int(low)

    def read_bytes(self, address: int, num: int) -> npt.NDArray[np.uint8]:
        self.check_address(address)
        if num:
            self.check_address(address + num - 1)
        return self.memory[address : address + num].copy()

    @staticmethod
    def check_address(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:  # 12 bits address
            raise AddressOutOfRange(address)
