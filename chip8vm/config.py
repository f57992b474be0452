"""Virtual machine configuration."""

from dataclasses import dataclass

from .constants import DEFAULT_CPU_HZ


@dataclass(frozen=True)
class VMConfig:
    """Tunable machine parameters. The 60 Hz timer rate is fixed and not part of this."""

    cpu_hz: float = DEFAULT_CPU_HZ  # instructions per second
    strict_opcodes: bool = True  # unknown opcodes halt the machine, otherwise skipped
    seed: int | None = None  # RNG seed for RND, None for OS entropy

    def __post_init__(self) -> None:
        if self.cpu_hz <= 0:
            raise ValueError(f"cpu_hz must be positive, got {self.cpu_hz}")
