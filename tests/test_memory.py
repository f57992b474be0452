import pytest

from chip8vm.data import FONT_DATA
from chip8vm.errors import AddressOutOfRange, RomTooLarge
from chip8vm.memory import Memory


def test_fonts_are_seeded():
    memory = Memory()
    assert memory.read_bytes(0, len(FONT_DATA)).tolist() == FONT_DATA.tolist()
    assert not memory.memory[len(FONT_DATA) :].any()


def test_load_program_at_0x200():
    memory = Memory()
    memory.load_program(b"\x12\x34\x56")
    assert memory.read_word(0x200) == 0x1234
    assert memory.read_byte(0x202) == 0x56


def test_load_program_that_fills_memory():
    memory = Memory()
    memory.load_program(bytes([0xAB]) * 3584)
    assert memory.read_byte(0xFFF) == 0xAB


def test_load_program_too_large():
    with pytest.raises(RomTooLarge) as exc_info:
        Memory().load_program(bytes(3585))
    assert exc_info.value.size == 3585
    assert exc_info.value.limit == 3584


@pytest.mark.parametrize("address", [-1, 0x1000, 0xFFFF])
def test_access_out_of_range(address: int):
    memory = Memory()
    with pytest.raises(AddressOutOfRange):
        memory.read_byte(address)
    with pytest.raises(AddressOutOfRange):
        memory.write_byte(address, 1)


def test_read_word_across_end():
    with pytest.raises(AddressOutOfRange):
        Memory().read_word(0xFFF)


def test_write_byte_masks_value():
    memory = Memory()
    memory.write_byte(0x300, 0x1FF)
    assert memory.read_byte(0x300) == 0xFF
