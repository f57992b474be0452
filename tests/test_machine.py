from pathlib import Path

import numpy as np
import pytest

from chip8vm import Machine, RomNotFound, RomTooLarge, StackOverflow, UnknownOpcode, VMConfig, read_rom
from chip8vm.data import FONT_DATA


def program(*operations: int) -> bytes:
    return b"".join(op.to_bytes(2, "big") for op in operations)


@pytest.fixture()
def machine() -> Machine:
    return Machine(VMConfig(cpu_hz=600, seed=1))


def test_draw_font_program(machine: Machine):
    machine.initialize(program(0x00E0, 0xD015, 0x1204))
    for _ in range(2):
        assert machine.step()
    screen = machine.display_snapshot()
    expected = np.unpackbits(FONT_DATA[0:5]).reshape(5, 8).astype(bool)
    assert (screen[0:5, 0:8] == expected).all()
    assert screen.sum() == expected.sum()
    assert machine.cpu.data_registers[0xF] == 0


def test_advance_reports_frame(machine: Machine):
    machine.initialize(program(0x6005, 0xF018, 0xD015, 0x1206))
    frame = machine.advance(1 / 60)
    assert frame.redraw
    assert frame.sound_active
    assert frame.fault is None
    assert frame.screen[0, 5:9].all()
    assert not machine.advance(1 / 60).redraw


def test_timers_run_at_sixty_hertz_regardless_of_cpu_rate():
    for cpu_hz in (120, 600, 6000):
        machine = Machine(VMConfig(cpu_hz=cpu_hz))
        machine.initialize(program(0x603C, 0xF015, 0x1204))
        machine.advance(0.25)
        assert machine.timers.delay == 60 - 15


def test_uninitialized_machine_does_nothing(machine: Machine):
    frame = machine.advance(1.0)
    assert not frame.screen.any()
    assert machine.cpu.cycles == 0
    assert not machine.step()


def test_rom_too_large_leaves_machine_uninitialized(machine: Machine):
    with pytest.raises(RomTooLarge):
        machine.initialize(bytes(4000))
    assert not machine.initialized
    machine.advance(1.0)
    assert machine.cpu.cycles == 0


def test_read_rom(tmp_path: Path):
    rom_file = tmp_path / "test.ch8"
    rom_file.write_bytes(program(0x00E0, 0x1200))
    assert read_rom(rom_file).tolist() == [0x00, 0xE0, 0x12, 0x00]
    with pytest.raises(RomNotFound):
        read_rom(tmp_path / "missing.ch8")


def test_unknown_opcode_halts_until_reset(machine: Machine):
    machine.initialize(program(0x6001, 0x7001, 0x0123))
    frame = machine.advance(1.0)
    assert isinstance(frame.fault, UnknownOpcode)
    assert frame.fault.address == 0x204
    assert frame.fault.raw_bytes == b"\x01\x23"
    assert machine.halted
    assert machine.cpu.cycles == 3

    machine.advance(1.0)
    assert machine.cpu.cycles == 3

    machine.reset()
    assert not machine.halted
    assert machine.cpu.register_PC == 0x200
    assert machine.memory.read_word(0x204) == 0x0123
    machine.step()
    assert machine.cpu.data_registers[0] == 1


def test_recursion_overflows_stack(machine: Machine):
    machine.initialize(program(0x2200))
    machine.advance(1.0)
    assert isinstance(machine.fault, StackOverflow)
    assert len(machine.stack) == 16


def test_timers_tick_after_fault(machine: Machine):
    machine.initialize(program(0x6010, 0xF015, 0xF118, 0x0000))
    machine.advance(1 / 60)
    assert machine.halted
    delay = machine.timers.delay
    machine.advance(5 / 60)
    assert machine.timers.delay == delay - 5


def test_key_wait_keeps_timers_running(machine: Machine):
    machine.initialize(program(0x6020, 0xF015, 0xF30A, 0x6401, 0x1208))
    machine.advance(10 / 60)
    state = machine.state()
    assert state.awaiting_key == 3
    assert state.register_DT == 0x20 - 10
    assert machine.cpu.data_registers[4] == 0

    machine.set_key_state(0xB, True)
    machine.advance(1 / 60)
    assert machine.cpu.data_registers[3] == 0xB
    assert machine.cpu.data_registers[4] == 1


def test_reset_cancels_key_wait(machine: Machine):
    machine.initialize(program(0xF30A))
    machine.advance(1 / 60)
    assert machine.cpu.awaiting_key == 3
    machine.reset()
    assert machine.cpu.awaiting_key is None


def test_state_snapshot(machine: Machine):
    machine.initialize(program(0x2206, 0x0000, 0x0000, 0x61AB, 0xD015))
    machine.step()
    machine.step()
    state = machine.state()
    assert state.register_PC == 0x208
    assert state.stack == (0x202,)
    assert state.data_registers[1] == 0xAB
    assert state.instruction == "DRW V0, V1, 5"
    assert "AB" in state.get_data_registers()


def test_invalid_key_code(machine: Machine):
    with pytest.raises(ValueError):
        machine.set_key_state(16, True)


def test_seeded_machines_agree():
    results = []
    for _ in range(2):
        machine = Machine(VMConfig(seed=99))
        machine.initialize(program(0xC0FF, 0xC1FF, 0x1204))
        machine.step()
        machine.step()
        results.append(machine.cpu.data_registers[:2].tolist())
    assert results[0] == results[1]


def test_invalid_config():
    with pytest.raises(ValueError):
        VMConfig(cpu_hz=0)


def test_reset_replays_seeded_random_sequence():
    machine = Machine(VMConfig(seed=5))
    machine.initialize(program(0xC0FF, 0xC1FF, 0xC2FF))
    results = []
    for _ in range(2):
        for _ in range(3):
            machine.step()
        results.append(machine.cpu.data_registers[:3].tolist())
        machine.reset()
    assert results[0] == results[1]


def test_reset_keeps_injected_generator():
    rng = np.random.default_rng(3)
    machine = Machine(rng=rng)
    machine.reset()
    assert machine.cpu.rng is rng


def test_negative_elapsed_is_rejected_before_initialize():
    with pytest.raises(ValueError):
        Machine().advance(-1.0)


def test_state_shows_pending_key_wait(machine: Machine):
    machine.initialize(program(0xF30A, 0x6401))
    machine.step()
    state = machine.state()
    assert state.instruction == "LD V3, K"
    assert state.register_PC == 0x202


def test_text_rendering(machine: Machine):
    machine.initialize(program(0x6012, 0xD015))
    machine.step()
    machine.step()
    text = str(machine)
    lines = text.splitlines()
    assert lines[0].startswith("PC: (516, '0x204')")
    assert "12|00" in lines[0]
    assert lines[1] == "+" * 66
    assert lines[2] == "+" + " " * 18 + "████" + " " * 42 + "+"
    assert len(lines) == 1 + 32 + 2
