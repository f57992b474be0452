"""Decoding of 16 bit instruction words into instruction objects.

Every instruction form is its own frozen dataclass, ``decode`` maps a word onto
exactly one of them (``Unknown`` for anything outside the instruction set).
``str()`` of an instruction gives its assembler mnemonic.
"""

from dataclasses import dataclass
from typing import ClassVar

# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM


@dataclass(frozen=True)
class Op:
    mnemonic: ClassVar[str] = ""

    def __str__(self) -> str:
        return self.mnemonic.format(**self.__dict__)


@dataclass(frozen=True)
class Cls(Op):
    mnemonic = "CLS"


@dataclass(frozen=True)
class Ret(Op):
    mnemonic = "RET"


@dataclass(frozen=True)
class Jump(Op):
    mnemonic = "JP 0x{nnn:03X}"
    nnn: int


@dataclass(frozen=True)
class JumpV0(Op):
    mnemonic = "JP V0, 0x{nnn:03X}"
    nnn: int


@dataclass(frozen=True)
class Call(Op):
    mnemonic = "CALL 0x{nnn:03X}"
    nnn: int


@dataclass(frozen=True)
class SkipEqByte(Op):
    mnemonic = "SE V{x:X}, 0x{kk:02X}"
    x: int
    kk: int


@dataclass(frozen=True)
class SkipNeByte(Op):
    mnemonic = "SNE V{x:X}, 0x{kk:02X}"
    x: int
    kk: int


@dataclass(frozen=True)
class SkipEqReg(Op):
    mnemonic = "SE V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class SkipNeReg(Op):
    mnemonic = "SNE V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class LoadByte(Op):
    mnemonic = "LD V{x:X}, 0x{kk:02X}"
    x: int
    kk: int


@dataclass(frozen=True)
class AddByte(Op):
    mnemonic = "ADD V{x:X}, 0x{kk:02X}"
    x: int
    kk: int


@dataclass(frozen=True)
class LoadReg(Op):
    mnemonic = "LD V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class Or(Op):
    mnemonic = "OR V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class And(Op):
    mnemonic = "AND V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class Xor(Op):
    mnemonic = "XOR V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class AddReg(Op):
    mnemonic = "ADD V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class Sub(Op):
    mnemonic = "SUB V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class ShiftRight(Op):
    mnemonic = "SHR V{x:X}"
    x: int


@dataclass(frozen=True)
class SubN(Op):
    mnemonic = "SUBN V{x:X}, V{y:X}"
    x: int
    y: int


@dataclass(frozen=True)
class ShiftLeft(Op):
    mnemonic = "SHL V{x:X}"
    x: int


@dataclass(frozen=True)
class LoadI(Op):
    mnemonic = "LD I, 0x{nnn:03X}"
    nnn: int


@dataclass(frozen=True)
class Random(Op):
    mnemonic = "RND V{x:X}, 0x{kk:02X}"
    x: int
    kk: int


@dataclass(frozen=True)
class Draw(Op):
    mnemonic = "DRW V{x:X}, V{y:X}, {n}"
    x: int
    y: int
    n: int


@dataclass(frozen=True)
class SkipKey(Op):
    mnemonic = "SKP V{x:X}"
    x: int


@dataclass(frozen=True)
class SkipNotKey(Op):
    mnemonic = "SKNP V{x:X}"
    x: int


@dataclass(frozen=True)
class LoadDelay(Op):
    mnemonic = "LD V{x:X}, DT"
    x: int


@dataclass(frozen=True)
class WaitKey(Op):
    mnemonic = "LD V{x:X}, K"
    x: int


@dataclass(frozen=True)
class SetDelay(Op):
    mnemonic = "LD DT, V{x:X}"
    x: int


@dataclass(frozen=True)
class SetSound(Op):
    mnemonic = "LD ST, V{x:X}"
    x: int


@dataclass(frozen=True)
class AddI(Op):
    mnemonic = "ADD I, V{x:X}"
    x: int


@dataclass(frozen=True)
class LoadFont(Op):
    mnemonic = "LD F, V{x:X}"
    x: int


@dataclass(frozen=True)
class StoreBcd(Op):
    mnemonic = "LD B, V{x:X}"
    x: int


@dataclass(frozen=True)
class StoreRegisters(Op):
    mnemonic = "LD [I], V{x:X}"
    x: int


@dataclass(frozen=True)
class LoadRegisters(Op):
    mnemonic = "LD V{x:X}, [I]"
    x: int


@dataclass(frozen=True)
class Unknown(Op):
    mnemonic = "DW 0x{word:04X}"
    word: int


Instruction = (
    Cls | Ret | Jump | JumpV0 | Call
    | SkipEqByte | SkipNeByte | SkipEqReg | SkipNeReg
    | LoadByte | AddByte | LoadReg | Or | And | Xor | AddReg | Sub | ShiftRight | SubN | ShiftLeft
    | LoadI | Random | Draw | SkipKey | SkipNotKey
    | LoadDelay | WaitKey | SetDelay | SetSound | AddI | LoadFont | StoreBcd | StoreRegisters | LoadRegisters
    | Unknown
)  # fmt: skip


def decode(operation: int) -> Instruction:  # noqa: C901, PLR0911, PLR0912
    nnn = operation & 0x0FFF
    kk = operation & 0x00FF
    n = operation & 0x000F
    x = (operation & 0x0F00) >> 8
    y = (operation & 0x00F0) >> 4
    match tuple(f"{operation:04x}"):
        case ("0", "0", "e", "0"):
            return Cls()
        case ("0", "0", "e", "e"):
            return Ret()
        case ("1", *_):
            return Jump(nnn)
        case ("2", *_):
            return Call(nnn)
        case ("3", *_):
            return SkipEqByte(x, kk)
        case ("4", *_):
            return SkipNeByte(x, kk)
        case ("5", _, _, "0"):
            return SkipEqReg(x, y)
        case ("6", *_):
            return LoadByte(x, kk)
        case ("7", *_):
            return AddByte(x, kk)
        case ("8", _, _, "0"):
            return LoadReg(x, y)
        case ("8", _, _, "1"):
            return Or(x, y)
        case ("8", _, _, "2"):
            return And(x, y)
        case ("8", _, _, "3"):
            return Xor(x, y)
        case ("8", _, _, "4"):
            return AddReg(x, y)
        case ("8", _, _, "5"):
            return Sub(x, y)
        case ("8", _, _, "6"):
            return ShiftRight(x)
        case ("8", _, _, "7"):
            return SubN(x, y)
        case ("8", _, _, "e"):
            return ShiftLeft(x)
        case ("9", _, _, "0"):
            return SkipNeReg(x, y)
        case ("a", *_):
            return LoadI(nnn)
        case ("b", *_):
            return JumpV0(nnn)
        case ("c", *_):
            return Random(x, kk)
        case ("d", *_):
            return Draw(x, y, n)
        case ("e", _, "9", "e"):
            return SkipKey(x)
        case ("e", _, "a", "1"):
            return SkipNotKey(x)
        case ("f", _, "0", "7"):
            return LoadDelay(x)
        case ("f", _, "0", "a"):
            return WaitKey(x)
        case ("f", _, "1", "5"):
            return SetDelay(x)
        case ("f", _, "1", "8"):
            return SetSound(x)
        case ("f", _, "1", "e"):
            return AddI(x)
        case ("f", _, "2", "9"):
            return LoadFont(x)
        case ("f", _, "3", "3"):
            return StoreBcd(x)
        case ("f", _, "5", "5"):
            return StoreRegisters(x)
        case ("f", _, "6", "5"):
            return LoadRegisters(x)
        case _:
            return Unknown(operation)
