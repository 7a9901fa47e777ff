"""Command-line entry point: wake the robot and serve its web controller."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Protocol

from .commands import RoboCommand
from .controller import Level, RobosapiensController
from .webserver import make_server

log = logging.getLogger(__name__)

WAKE_UP_COMMAND = RoboCommand.WHISTLE
READY_COMMANDS = (RoboCommand.HIGH_FIVE, RoboCommand.TALKBACK)


class Robot(Protocol):
    def begin(self) -> None: ...

    def send_command(self, command: int) -> None: ...


class _LoggingLine:
    """Output line that reports every level change to the log."""

    def write(self, level: Level) -> None:
        log.debug("line %s", Level(level).name)


def startup(robot: Robot) -> None:
    """Initialise the robot, wake it up and signal that it is ready."""
    robot.begin()
    robot.send_command(WAKE_UP_COMMAND)
    for command in READY_COMMANDS:
        robot.send_command(command)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="robocontrol", description="Serve a web page that controls a Robosapien."
    )
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=80, help="port to listen on")
    parser.add_argument("-v", "--verbose", action="store_true", help="log line levels too")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the controller web server until interrupted."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    robot = RobosapiensController(_LoggingLine())
    startup(robot)

    log.info("Setting up web server...")
    server = make_server(robot, args.host, args.port)
    log.info("Web server ready on %s:%d.", *server.server_address[:2])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0