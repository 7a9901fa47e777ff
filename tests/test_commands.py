import pytest

from robocontrol.commands import RoboCommand, command_name


@pytest.mark.parametrize(
    "command, expected",
    [
        (RoboCommand.TURN_RIGHT, "Turn Right"),
        (RoboCommand.MASTER_COMMAND_PROGRAM, "Master Command Program"),
        (RoboCommand.RIGHT_HAND_STRIKE_3, "Right Hand Strike 3"),
        (RoboCommand.OOPS_FART, "Oops Fart"),
        (RoboCommand.TALKBACK, "Talkback"),
        (RoboCommand.DEMO_1, "Demo 1"),
        (RoboCommand.WHISTLE, "Whistle"),
        (RoboCommand.DANCE, "Dance"),
    ],
)
def test_command_names(command, expected):
    assert command_name(command) == expected


def test_plain_int_is_accepted():
    assert command_name(0xCA) == "Whistle"


@pytest.mark.parametrize("value", [0x00, 0x7F, 0x8F, 0xCF, 0xFF, 300])
def test_unknown_command(value):
    assert command_name(value) == "Unknown Command"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0xCA, RoboCommand.WHISTLE),
        (0x8E, RoboCommand.STOP),
        (0xD4, RoboCommand.DANCE),
    ],
)
def test_wire_values_pinned(value, expected):
    assert RoboCommand(value) is expected
    assert int(RoboCommand(value)) == value


def test_every_command_has_msb_set():
    for command in RoboCommand:
        value = int(command)
        assert RoboCommand(value) is command
        assert value & 0x80


def test_names_are_unique_and_known():
    names = [command_name(command) for command in RoboCommand]
    assert len(set(names)) == len(names)
    assert "Unknown Command" not in names


def test_label_matches_command_name():
    for command in RoboCommand:
        assert command.label == command_name(int(command))