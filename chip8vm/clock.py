"""Dual rate scheduler: CPU cycles at a configurable rate, timer ticks at a fixed 60 Hz."""

from collections.abc import Callable

from .constants import DEFAULT_CPU_HZ, TIMER_HZ

# absorbs float error so that e.g. three advances of 1/60 s owe exactly three ticks
_EPSILON = 1e-9


class Clock:
    def __init__(self, cpu_hz: float = DEFAULT_CPU_HZ, timer_hz: float = TIMER_HZ) -> None:
        if cpu_hz <= 0:
            raise ValueError(f"cpu_hz must be positive, got {cpu_hz}")
        self.cpu_hz = cpu_hz
        self.timer_hz = timer_hz
        self.owed_cycles = 0.0
        self.owed_ticks = 0.0

    def owed(self, elapsed: float) -> tuple[int, int]:
        """Add elapsed seconds and return the whole (cycles, ticks) now due.

        Fractions are carried over to the next call.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed time must not be negative, got {elapsed}")
        self.owed_cycles += elapsed * self.cpu_hz
        self.owed_ticks += elapsed * self.timer_hz
        cycles = int(self.owed_cycles + _EPSILON)
        ticks = int(self.owed_ticks + _EPSILON)
        self.owed_cycles -= cycles
        self.owed_ticks -= ticks
        return cycles, ticks

    def advance(self, elapsed: float, cycle: Callable[[], bool], tick: Callable[[], None]) -> int:
        """Run the cycles and ticks owed for ``elapsed`` seconds.

        Ticks are spread evenly between the cycles. ``cycle`` returns False to
        stop running cycles for this call, the owed ticks still happen.
        Returns the number of cycles executed.
        """
        cycles, ticks = self.owed(elapsed)
        done_ticks = 0
        executed = 0
        for i in range(cycles):
            if not cycle():
                break
            executed += 1
            # the k-th tick is due once (i + 1) / cycles of the interval has passed
            while done_ticks < ticks and (done_ticks + 1) * cycles <= (i + 1) * ticks:
                tick()
                done_ticks += 1
        for _ in range(ticks - done_ticks):
            tick()
        return executed

    def reset(self) -> None:
        self.owed_cycles = 0.0
        self.owed_ticks = 0.0
