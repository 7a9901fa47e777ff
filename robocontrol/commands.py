"""Infrared command codes understood by the Robosapien toy robot."""

from __future__ import annotations

from enum import IntEnum

UNKNOWN_COMMAND_NAME = "Unknown Command"


class RoboCommand(IntEnum):
    """One-byte command codes, grouped as on the original remote."""

    # Basic movement
    TURN_RIGHT = 0x80
    RIGHT_ARM_UP = 0x81
    RIGHT_ARM_OUT = 0x82
    TILT_BODY_RIGHT = 0x83
    RIGHT_ARM_DOWN = 0x84
    RIGHT_ARM_IN = 0x85
    WALK_FORWARD = 0x86
    WALK_BACKWARD = 0x87
    TURN_LEFT = 0x88
    LEFT_ARM_UP = 0x89
    LEFT_ARM_OUT = 0x8A
    TILT_BODY_LEFT = 0x8B
    LEFT_ARM_DOWN = 0x8C
    LEFT_ARM_IN = 0x8D
    STOP = 0x8E

    # Programming
    MASTER_COMMAND_PROGRAM = 0x90
    PROGRAM_PLAY = 0x91
    RIGHT_SENSOR_PROGRAM = 0x92
    LEFT_SENSOR_PROGRAM = 0x93
    SONIC_SENSOR_PROGRAM = 0x94

    # Green shift
    RIGHT_TURN_STEP = 0xA0
    RIGHT_HAND_THUMP = 0xA1
    RIGHT_HAND_THROW = 0xA2
    SLEEP = 0xA3
    RIGHT_HAND_PICKUP = 0xA4
    LEAN_BACKWARD = 0xA5
    FORWARD_STEP = 0xA6
    BACKWARD_STEP = 0xA7
    LEFT_TURN_STEP = 0xA8
    LEFT_HAND_THUMP = 0xA9
    LEFT_HAND_THROW = 0xAA
    LISTEN = 0xAB
    LEFT_HAND_PICKUP = 0xAC
    LEAN_FORWARD = 0xAD
    RESET = 0xAE

    # Orange shift
    RIGHT_HAND_STRIKE_3 = 0xC0
    RIGHT_HAND_SWEEP = 0xC1
    BURP = 0xC2
    RIGHT_HAND_STRIKE_2 = 0xC3
    HIGH_FIVE = 0xC4
    RIGHT_HAND_STRIKE_1 = 0xC5
    BULLDOZER = 0xC6
    OOPS_FART = 0xC7
    LEFT_HAND_STRIKE_3 = 0xC8
    LEFT_HAND_SWEEP = 0xC9
    WHISTLE = 0xCA
    LEFT_HAND_STRIKE_2 = 0xCB
    TALKBACK = 0xCC
    LEFT_HAND_STRIKE_1 = 0xCD
    ROAR = 0xCE
    DEMO_ALL = 0xD0
    POWER_OFF = 0xD1
    DEMO_1 = 0xD2
    DEMO_2 = 0xD3
    DANCE = 0xD4

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Right Hand Strike 3"``."""
        return self.name.replace("_", " ").title()


def command_name(command: int) -> str:
    """Return the display name of a command code, or ``"Unknown Command"``."""
    try:
        return RoboCommand(int(command)).label
    except ValueError:
        return UNKNOWN_COMMAND_NAME