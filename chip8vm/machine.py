"""Host facing surface of the virtual machine.

The host calls ``initialize`` once with a program image, then once per frame
``advance`` with the wall-clock time since the previous frame, renders the
returned screen and plays a tone while ``sound_active`` is set. Key events go
through ``set_key_state``.
"""

import logging
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from .clock import Clock
from .config import VMConfig
from .cpu import CPU
from .display import Display
from .errors import AddressOutOfRange, ExecutionError
from .instructions import WaitKey, decode
from .keypad import Keypad
from .memory import Memory
from .stack import CallStack
from .timers import Timers


@dataclass(frozen=True)
class Frame:
    screen: npt.NDArray[np.bool_]
    sound_active: bool
    redraw: bool  # screen changed since the previous frame
    fault: ExecutionError | None


@dataclass(frozen=True)
class MachineState:
    """Register level view of the machine, for debuggers."""

    register_PC: int
    register_I: int
    register_DT: int
    register_ST: int
    data_registers: tuple[int, ...]
    stack: tuple[int, ...]
    awaiting_key: int | None
    instruction: str

    def get_data_registers(self) -> str:
        lines = [
            "".join(hex(e)[2:].upper().rjust(6) for e in range(len(self.data_registers))),
            "".join(str(e).rjust(6) for e in self.data_registers),
            "".join(("0x" + hex(e)[2:].upper().zfill(2)).rjust(6) for e in self.data_registers),
        ]
        return "\n".join(lines)


class Machine:
    def __init__(self, config: VMConfig | None = None, rng: np.random.Generator | None = None) -> None:
        self.config = config or VMConfig()
        self.injected_rng = rng  # not rewound by reset
        self.clock = Clock(self.config.cpu_hz)
        self.program: bytes | None = None
        self.fault: ExecutionError | None = None
        self._build()

    def _build(self) -> None:
        self.rng = self.injected_rng if self.injected_rng is not None else np.random.default_rng(self.config.seed)
        self.memory = Memory()
        self.display = Display()
        self.keypad = Keypad()
        self.timers = Timers()
        self.stack = CallStack()
        self.cpu = CPU(
            self.memory,
            self.display,
            self.keypad,
            self.timers,
            self.stack,
            rng=self.rng,
            strict_opcodes=self.config.strict_opcodes,
        )
        self.clock.reset()
        self.fault = None

    @property
    def initialized(self) -> bool:
        return self.program is not None

    @property
    def halted(self) -> bool:
        return self.fault is not None

    def initialize(self, program: bytes | bytearray | npt.NDArray[np.uint8]) -> None:
        """Load a program image at 0x200. Raises LoadError, leaving the machine uninitialized."""
        self.program = None
        self._build()
        self.memory.load_program(program)
        self.program = bytes(program)

    def reset(self) -> None:
        """Recreate the machine and reload the last program, clearing faults and key waits."""
        self._build()
        if self.program is not None:
            self.memory.load_program(self.program)
        logging.info("Machine reset")

    def step(self) -> bool:
        """Execute a single CPU cycle without ticking the timers.

        Returns False when the machine is halted or has no program.
        """
        if not self.initialized or self.halted:
            return False
        try:
            self.cpu.cycle()
        except ExecutionError as e:
            self.fault = e
            logging.error("Machine halted: %s", e)
            return False
        return True

    def advance(self, elapsed: float) -> Frame:
        """Run the cycles and 60 Hz timer ticks owed for ``elapsed`` seconds."""
        if elapsed < 0:
            raise ValueError(f"elapsed time must not be negative, got {elapsed}")
        if self.initialized:
            self.clock.advance(elapsed, self.step, self.timers.tick)
        redraw = self.display.dirty
        self.display.dirty = False
        return Frame(self.display_snapshot(), self.sound_active(), redraw, self.fault)

    def display_snapshot(self) -> npt.NDArray[np.bool_]:
        return self.display.snapshot()

    def sound_active(self) -> bool:
        return self.timers.sound_active()

    def set_key_state(self, code: int, pressed: bool) -> None:
        self.keypad.set_key_state(code, pressed)

    def state(self) -> MachineState:
        if self.cpu.awaiting_key is not None:
            instruction = str(WaitKey(self.cpu.awaiting_key))
        else:
            try:
                instruction = str(decode(self.cpu.fetch()))
            except AddressOutOfRange:
                instruction = "??"
        return MachineState(
            register_PC=self.cpu.register_PC,
            register_I=self.cpu.register_I,
            register_DT=self.timers.delay,
            register_ST=self.timers.sound,
            data_registers=tuple(int(v) for v in self.cpu.data_registers),
            stack=tuple(self.stack.addresses),
            awaiting_key=self.cpu.awaiting_key,
            instruction=instruction,
        )

    def __str__(self) -> str:
        return f"{self.cpu}\n{self.display}"
