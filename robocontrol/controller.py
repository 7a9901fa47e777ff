"""Bit-banged infrared signalling for the Robosapien."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

from .commands import command_name

log = logging.getLogger(__name__)

CLOCK_PERIOD_US = 833
"""Length of one signal tick in microseconds (1/1200 s)."""

START_TICKS = 8
ONE_HIGH_TICKS = 4
ZERO_HIGH_TICKS = 1
BIT_LOW_TICKS = 1
INTER_COMMAND_PAUSE_US = 1000


class Level(IntEnum):
    """Logic level of the control line."""

    LOW = 0
    HIGH = 1


class OutputLine(Protocol):
    """Anything that can drive a digital output."""

    def write(self, level: Level) -> None: ...


@dataclass
class RecordingLine:
    """Output line that keeps every level written to it."""

    levels: list[Level] = field(default_factory=list)

    def write(self, level: Level) -> None:
        self.levels.append(Level(level))


def encode(command: int) -> list[tuple[Level, int]]:
    """Return the pulses ``(level, ticks)`` that transmit one command byte.

    Raises ValueError if the value is not a byte or its top bit is clear.
    """
    value = int(command)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"command {value} is not a single byte")
    if not value & 0x80:
        raise ValueError("invalid command: the most significant bit must be 1")

    pulses = [(Level.LOW, START_TICKS)]
    for shift in range(7, -1, -1):
        high_ticks = ONE_HIGH_TICKS if (value >> shift) & 1 else ZERO_HIGH_TICKS
        pulses.append((Level.HIGH, high_ticks))
        pulses.append((Level.LOW, BIT_LOW_TICKS))
    return pulses


def _sleep_microseconds(microseconds: int) -> None:
    time.sleep(microseconds / 1_000_000)


class RobosapiensController:
    """Drives a Robosapien through one output line."""

    def __init__(
        self,
        line: OutputLine,
        delay: Callable[[int], None] = _sleep_microseconds,
    ) -> None:
        self.line = line
        self.delay = delay

    def begin(self) -> None:
        """Put the line into its idle (high) state."""
        self.line.write(Level.HIGH)

    def send_command(self, command: int) -> None:
        """Transmit one command, then return the line to idle."""
        pulses = encode(command)
        log.info("> RobosapiensController sendCommand: %s", command_name(command))
        for level, ticks in pulses:
            self.line.write(level)
            self.delay(CLOCK_PERIOD_US * ticks)
        self.line.write(Level.HIGH)
        self.delay(INTER_COMMAND_PAUSE_US)