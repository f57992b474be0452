class Chip8Error(Exception):
    """Base class for everything the virtual machine raises."""


class LoadError(Chip8Error):
    """Program image could not be loaded, the machine stays uninitialized."""


class RomNotFound(LoadError):
    def __init__(self, path: object) -> None:
        super().__init__(f"ROM not found: {path}")
        self.path = path


class RomTooLarge(LoadError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"ROM is {size} bytes, at most {limit} bytes fit into memory")
        self.size = size
        self.limit = limit


class ExecutionError(Chip8Error):
    """Fatal error while running a program. Halts the machine until reset."""


class AddressOutOfRange(ExecutionError):
    def __init__(self, address: int) -> None:
        super().__init__(f"Address out of range: 0x{address:X}")
        self.address = address


class StackOverflow(ExecutionError):
    def __init__(self, depth: int) -> None:
        super().__init__(f"Call stack overflow, depth {depth} exceeded")
        self.depth = depth


class StackUnderflow(ExecutionError):
    def __init__(self) -> None:
        super().__init__("Return with empty call stack")


class UnknownOpcode(ExecutionError):
    def __init__(self, address: int, operation: int) -> None:
        super().__init__(f"Unknown opcode 0x{operation:04X} at 0x{address:04X}")
        self.address = address
        self.operation = operation

    @property
    def raw_bytes(self) -> bytes:
        return self.operation.to_bytes(2, "big")
