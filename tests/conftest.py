import numpy as np
import pytest

from chip8vm.cpu import CPU
from chip8vm.display import Display
from chip8vm.keypad import Keypad
from chip8vm.memory import Memory
from chip8vm.stack import CallStack
from chip8vm.timers import Timers


@pytest.fixture()
def cpu() -> CPU:
    return CPU(Memory(), Display(), Keypad(), Timers(), CallStack(), rng=np.random.default_rng(1234))


def run_ops(cpu: CPU, *operations: str) -> None:
    """Write the given hex words at PC and execute them one after another."""
    for operation in operations:
        word = int(operation, 16)
        cpu.memory.write_byte(cpu.register_PC, word >> 8)
        cpu.memory.write_byte(cpu.register_PC + 1, word & 0xFF)
        cpu.cycle()
