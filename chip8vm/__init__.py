from .config import VMConfig
from .data import read_rom
from .errors import (
    AddressOutOfRange,
    Chip8Error,
    ExecutionError,
    LoadError,
    RomNotFound,
    RomTooLarge,
    StackOverflow,
    StackUnderflow,
    UnknownOpcode,
)
from .machine import Frame, Machine, MachineState

__all__ = [
    "AddressOutOfRange",
    "Chip8Error",
    "ExecutionError",
    "Frame",
    "LoadError",
    "Machine",
    "MachineState",
    "RomNotFound",
    "RomTooLarge",
    "StackOverflow",
    "StackUnderflow",
    "UnknownOpcode",
    "VMConfig",
    "read_rom",
]
