import pytest

from robocontrol.commands import RoboCommand
from robocontrol.controller import (
    CLOCK_PERIOD_US,
    INTER_COMMAND_PAUSE_US,
    Level,
    RecordingLine,
    RobosapiensController,
    encode,
)


def _decode(pulses):
    """Read the byte back out of a pulse train."""
    assert pulses[0] == (Level.LOW, 8)
    value = 0
    for high, low in zip(pulses[1::2], pulses[2::2]):
        assert high[0] is Level.HIGH
        assert low == (Level.LOW, 1)
        value = (value << 1) | (1 if high[1] == 4 else 0)
    return value


def _controller():
    line = RecordingLine()
    delays = []
    return RobosapiensController(line, delays.append), line, delays


@pytest.mark.parametrize("command", list(RoboCommand))
def test_encode_round_trip(command):
    assert _decode(encode(command)) == int(command)


def test_encode_shape():
    pulses = encode(RoboCommand.STOP)
    assert len(pulses) == 17
    assert pulses[0] == (Level.LOW, 8)
    assert pulses[1] == (Level.HIGH, 4)


def test_encode_one_bits_are_long_pulses():
    pulses = encode(0xFF)
    assert all(ticks == 4 for level, ticks in pulses if level is Level.HIGH)


@pytest.mark.parametrize("value", [0x00, 0x7F, 0x40])
def test_encode_rejects_clear_msb(value):
    with pytest.raises(ValueError):
        encode(value)


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_rejects_non_byte(value):
    with pytest.raises(ValueError):
        encode(value)


def test_begin_sets_idle_high():
    controller, line, delays = _controller()
    controller.begin()
    assert line.levels == [Level.HIGH]
    assert delays == []


def test_send_command_drives_line():
    controller, line, delays = _controller()
    controller.send_command(RoboCommand.WHISTLE)
    pulses = encode(RoboCommand.WHISTLE)
    assert line.levels == [level for level, _ in pulses] + [Level.HIGH]
    assert delays == [CLOCK_PERIOD_US * ticks for _, ticks in pulses] + [
        INTER_COMMAND_PAUSE_US
    ]


def test_send_command_starts_with_start_pulse():
    controller, line, delays = _controller()
    controller.send_command(RoboCommand.DANCE)
    assert line.levels[0] is Level.LOW
    assert delays[0] == CLOCK_PERIOD_US * 8


def test_send_invalid_command_writes_nothing():
    controller, line, delays = _controller()
    with pytest.raises(ValueError):
        controller.send_command(0x10)
    assert line.levels == []
    assert delays == []


def test_recording_line_normalises_levels():
    line = RecordingLine()
    line.write(1)
    line.write(Level.LOW)
    assert line.levels == [Level.HIGH, Level.LOW]