import pytest

from mcukit.mcp23017 import MCP23017, PinMode


class FakeBus:
    def __init__(self):
        self.registers = {}
        self.pointer = 0
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))
        self.pointer = data[0]
        if len(data) >= 2:
            self.registers[data[0]] = data[1]

    def read(self, address, length):
        return bytes([self.registers.get(self.pointer, 0)])[:length]


class EmptyBus(FakeBus):
    def read(self, address, length):
        return b""


def test_begin_writes_control_and_pullups():
    bus = FakeBus()
    chip = MCP23017(bus, 0x20)
    chip.begin()
    assert bus.writes == [
        (0x20, bytes([0x0A, 0x20])),
        (0x20, bytes([0x0C, 0xFF])),
        (0x20, bytes([0x0D, 0xFF])),
    ]


def test_pin_mode_output_clears_direction_bit_on_port_b():
    bus = FakeBus()
    bus.registers[0x01] = 0xFF
    chip = MCP23017(bus, 0x20)
    chip.pin_mode(9, PinMode.OUTPUT)
    assert bus.registers[0x01] == 0xFF & ~(1 << 1)


def test_pin_mode_input_sets_direction_bit_on_port_a():
    bus = FakeBus()
    bus.registers[0x00] = 0x00
    chip = MCP23017(bus, 0x20)
    chip.pin_mode(3, PinMode.INPUT_PULLUP)
    assert bus.registers[0x00] == 1 << 3


def test_digital_write_then_read_round_trip():
    bus = FakeBus()
    chip = MCP23017(bus, 0x20)
    chip.digital_write(12, 1)
    assert chip.digital_read(12) == 1
    assert chip.digital_read(11) == 0
    chip.digital_write(12, 0)
    assert chip.digital_read(12) == 0


def test_write8_read8_round_trip():
    bus = FakeBus()
    chip = MCP23017(bus, 0x20)
    chip.write8(0, 0x5A)
    chip.write8(1, 0xA5)
    assert chip.read8(0) == 0x5A
    assert chip.read8(1) == 0xA5
    assert bus.registers[0x12] == 0x5A
    assert bus.registers[0x13] == 0xA5


def test_pin_mode8_writes_direction_register():
    bus = FakeBus()
    chip = MCP23017(bus, 0x20)
    chip.pin_mode8(1, 0x0F)
    assert bus.registers[0x01] == 0x0F


@pytest.mark.parametrize("pin", [16, -1, 200])
def test_invalid_pin_raises(pin):
    chip = MCP23017(FakeBus(), 0x20)
    with pytest.raises(ValueError):
        chip.digital_read(pin)


def test_invalid_mode_raises():
    chip = MCP23017(FakeBus(), 0x20)
    with pytest.raises(ValueError):
        chip.pin_mode(0, 7)


def test_invalid_port_raises():
    chip = MCP23017(FakeBus(), 0x20)
    with pytest.raises(ValueError):
        chip.read8(2)


def test_short_read_raises_oserror():
    chip = MCP23017(EmptyBus(), 0x20)
    with pytest.raises(OSError):
        chip.read8(0)