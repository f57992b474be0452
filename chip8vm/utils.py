import numpy as np
import numpy.typing as npt


def display_bytes(data: bytes | bytearray | npt.NDArray[np.uint8]) -> str:
    if isinstance(data, bytes):
        data = bytearray(data)
    buffer = [hex(b)[2:].zfill(2) for b in data]
    return "|".join(buffer)
