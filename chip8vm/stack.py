from .constants import STACK_DEPTH
from .errors import StackOverflow, StackUnderflow


class CallStack:
    """Return addresses for CALL/RET, at most STACK_DEPTH levels deep."""

    def __init__(self, depth: int = STACK_DEPTH) -> None:
        self.depth = depth
        self.addresses: list[int] = []

    def push(self, address: int) -> None:
        if len(self.addresses) >= self.depth:
            raise StackOverflow(self.depth)
        self.addresses.append(address)

    def pop(self) -> int:
        if not self.addresses:
            raise StackUnderflow()
        return self.addresses.pop()

    def __len__(self) -> int:
        return len(self.addresses)

    def __str__(self) -> str:
        return "|".join(f"{a:03x}" for a in self.addresses)
