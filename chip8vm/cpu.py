import logging

import numpy as np

from .constants import FONT_SPRITE_SIZE, MEMORY_SIZE, MEMORY_START_FONT, MEMORY_START_ROM, NUM_REGISTERS, REGISTER_FLAG
from .display import Display
from .errors import UnknownOpcode
from .instructions import (
    AddByte,
    AddI,
    AddReg,
    And,
    Call,
    Cls,
    Draw,
    Instruction,
    Jump,
    JumpV0,
    LoadByte,
    LoadDelay,
    LoadFont,
    LoadI,
    LoadReg,
    LoadRegisters,
    Or,
    Random,
    Ret,
    SetDelay,
    SetSound,
    ShiftLeft,
    ShiftRight,
    SkipEqByte,
    SkipEqReg,
    SkipKey,
    SkipNeByte,
    SkipNeReg,
    SkipNotKey,
    StoreBcd,
    StoreRegisters,
    Sub,
    SubN,
    Unknown,
    WaitKey,
    Xor,
    decode,
)
from .keypad import Keypad
from .memory import Memory
from .stack import CallStack
from .timers import Timers
from .utils import display_bytes

# https://colineberhardt.github.io/wasm-rust-chip8/web/
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM


class CPU:
    def __init__(  # noqa: PLR0913
        self,
        memory: Memory,
        display: Display,
        keypad: Keypad,
        timers: Timers,
        stack: CallStack,
        rng: np.random.Generator | None = None,
        strict_opcodes: bool = True,
    ) -> None:
        self.memory = memory
        self.display = display
        self.keypad = keypad
        self.timers = timers
        self.stack = stack
        self.rng = rng if rng is not None else np.random.default_rng()
        self.strict_opcodes = strict_opcodes

        self.data_registers = np.zeros(NUM_REGISTERS, dtype=np.uint8)
        self.register_I = 0  # 12 bits
        self.register_PC = MEMORY_START_ROM
        self.awaiting_key: int | None = None
        self.cycles = 0

    def cycle(self) -> None:
        """Run one fetch-decode-execute step, or poll the keypad while waiting for a key."""
        self.cycles += 1
        if self.awaiting_key is not None:
            key = self.keypad.take_press()
            if key is not None:
                self.set_register(self.awaiting_key, key)
                self.awaiting_key = None
            return
        address = self.register_PC
        operation = self.fetch()
        instruction = decode(operation)
        logging.debug("%03X %04X %s", address, operation, instruction)
        self.register_PC += 2
        self.execute(instruction, address)

    def fetch(self) -> int:
        return self.memory.read_word(self.register_PC)

    def execute(self, instruction: Instruction, address: int) -> None:  # noqa: C901, PLR0912, PLR0915
        """Apply a decoded instruction. PC already points past it."""
        match instruction:
            case Cls():
                self.display.clear()
            case Ret():
                self.register_PC = self.stack.pop()
            case Jump(nnn):
                self.register_PC = nnn
            case JumpV0(nnn):
                self.register_PC = nnn + self.get_register(0)
            case Call(nnn):
                self.stack.push(self.register_PC)
                self.register_PC = nnn
            case SkipEqByte(x, kk):
                self.skip_if(self.get_register(x) == kk)
            case SkipNeByte(x, kk):
                self.skip_if(self.get_register(x) != kk)
            case SkipEqReg(x, y):
                self.skip_if(self.get_register(x) == self.get_register(y))
            case SkipNeReg(x, y):
                self.skip_if(self.get_register(x) != self.get_register(y))
            case LoadByte(x, kk):
                self.set_register(x, kk)
            case AddByte(x, kk):
                # no carry flag
                self.set_register(x, self.get_register(x) + kk)
            case LoadReg(x, y):
                self.set_register(x, self.get_register(y))
            case Or(x, y):
                self.set_register(x, self.get_register(x) | self.get_register(y))
            case And(x, y):
                self.set_register(x, self.get_register(x) & self.get_register(y))
            case Xor(x, y):
                self.set_register(x, self.get_register(x) ^ self.get_register(y))
            case AddReg(x, y):
                value = self.get_register(x) + self.get_register(y)
                self.set_register(x, value)
                self.set_flag(value > 0xFF)
            case Sub(x, y):
                value_1 = self.get_register(x)
                value_2 = self.get_register(y)
                self.set_register(x, value_1 - value_2)
                self.set_flag(value_1 >= value_2)
            case SubN(x, y):
                value_1 = self.get_register(x)
                value_2 = self.get_register(y)
                self.set_register(x, value_2 - value_1)
                self.set_flag(value_2 >= value_1)
            case ShiftRight(x):
                # Vx is shifted in place, Vy is ignored
                value = self.get_register(x)
                self.set_register(x, value >> 1)
                self.set_flag(value & 0x01)
            case ShiftLeft(x):
                value = self.get_register(x)
                self.set_register(x, value << 1)
                self.set_flag(value & 0x80)
            case LoadI(nnn):
                self.register_I = nnn
            case Random(x, kk):
                rnd = int(self.rng.integers(0, 256))
                self.set_register(x, rnd & kk)
            case Draw(x, y, n):
                graphic_data = self.memory.read_bytes(self.register_I, n)
                erased = self.display.blit(self.get_register(x), self.get_register(y), graphic_data)
                self.set_flag(erased)
            case SkipKey(x):
                self.skip_if(self.keypad.is_pressed(self.get_register(x)))
            case SkipNotKey(x):
                self.skip_if(not self.keypad.is_pressed(self.get_register(x)))
            case LoadDelay(x):
                self.set_register(x, self.timers.delay)
            case WaitKey(x):
                self.keypad.clear_press()
                self.awaiting_key = x
            case SetDelay(x):
                self.timers.delay = self.get_register(x)
            case SetSound(x):
                self.timers.sound = self.get_register(x)
            case AddI(x):
                self.register_I = (self.register_I + self.get_register(x)) % MEMORY_SIZE
            case LoadFont(x):
                digit = self.get_register(x) & 0xF
                self.register_I = MEMORY_START_FONT + digit * FONT_SPRITE_SIZE
            case StoreBcd(x):
                value = self.get_register(x)
                self.memory.write_byte(self.register_I, value // 100)
                self.memory.write_byte(self.register_I + 1, value // 10 % 10)
                self.memory.write_byte(self.register_I + 2, value % 10)
            case StoreRegisters(x):
                for i in range(x + 1):
                    self.memory.write_byte(self.register_I + i, self.get_register(i))
            case LoadRegisters(x):
                for i in range(x + 1):
                    self.set_register(i, self.memory.read_byte(self.register_I + i))
            case Unknown(word):
                if self.strict_opcodes:
                    raise UnknownOpcode(address, word)
                logging.warning("Skipping unknown opcode 0x%04X at 0x%03X", word, address)

    def skip_if(self, condition: bool) -> None:
        if condition:
            self.register_PC += 2

    def get_register(self, reg: int) -> int:
        return int(self.data_registers[reg])

    def set_register(self, reg: int, data: int) -> None:
        self.data_registers[reg] = data & 0xFF

    def set_flag(self, flag: object) -> None:
        self.set_register(REGISTER_FLAG, 1 if flag else 0)

    def __str__(self) -> str:
        return f"PC: {self.register_PC, hex(self.register_PC)}, I: {self.register_I}, regs: {display_bytes(self.data_registers)}"
