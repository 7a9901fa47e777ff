"""Small HTTP front end that lets a browser send commands to the robot."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Protocol
from urllib.parse import urlsplit

from .commands import RoboCommand, command_name

log = logging.getLogger(__name__)

LEFT_COMMANDS: tuple[RoboCommand, ...] = (
    RoboCommand.LEFT_ARM_UP,
    RoboCommand.LEFT_ARM_OUT,
    RoboCommand.TILT_BODY_LEFT,
    RoboCommand.LEFT_ARM_DOWN,
    RoboCommand.LEFT_ARM_IN,
    RoboCommand.TURN_LEFT,
)
RIGHT_COMMANDS: tuple[RoboCommand, ...] = (
    RoboCommand.RIGHT_ARM_UP,
    RoboCommand.RIGHT_ARM_OUT,
    RoboCommand.TILT_BODY_RIGHT,
    RoboCommand.RIGHT_ARM_DOWN,
    RoboCommand.RIGHT_ARM_IN,
    RoboCommand.TURN_RIGHT,
)
OTHER_COMMANDS: tuple[RoboCommand, ...] = (
    RoboCommand.WALK_FORWARD,
    RoboCommand.STOP,
    RoboCommand.WALK_BACKWARD,
)

NO_COMMAND_MESSAGE = "Bad Request: No command received."

_SCRIPT = (
    "<script>"
    "function sendCommand(command) {"
    "  var xhr = new XMLHttpRequest();"
    "  xhr.open('POST', '/command', true);"
    "  xhr.setRequestHeader('Content-Type', 'application/x-www-form-urlencoded');"
    "  xhr.send(command);"
    "}"
    "</script>"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CommandSink(Protocol):
    """Anything that can transmit a command byte."""

    def send_command(self, command: int) -> None: ...


@dataclass(frozen=True)
class Response:
    """Status, content type and text of an HTTP reply."""

    status: int
    content_type: str
    body: str


def _button(command: int, name: str) -> str:
    return f'<button onclick="sendCommand({int(command)})">{name}</button>'


def _column(predicate) -> str:
    buttons = "".join(
        _button(command, command.label)
        for command in RoboCommand
        if predicate(command.label)
    )
    return f"<div>{buttons}</div>"


def render_page() -> str:
    """Build the controller page: common moves, then left, centre and right columns."""
    for command in RoboCommand:
        log.debug("%s", command.label)

    common = "".join(_button(command, command_name(command)) for command in OTHER_COMMANDS)
    columns = (
        _column(lambda name: "Left" in name)
        + _column(lambda name: "Left" not in name and "Right" not in name)
        + _column(lambda name: "Right" in name)
    )
    return (
        "<html><body>"
        "<h1>RoboSapiens Controller</h1>"
        f'<div style="text-align:center;">{common}</div>'
        f'<div style="display:flex;justify-content:space-between;">{columns}</div>'
        f"{_SCRIPT}"
        "</body></html>"
    )


def _leading_int(text: str) -> int:
    """Parse a leading decimal integer the lenient way, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def handle_command(robot: CommandSink, body: str | None) -> Response:
    """Decode a command from a request body, send it to the robot and build the reply."""
    if not body:
        return Response(400, "text/plain", NO_COMMAND_MESSAGE)

    value = _leading_int(body) & 0xFF
    log.info("Command enum: %s (%d)", command_name(value), value)
    try:
        robot.send_command(value)
    except ValueError as error:
        log.warning("%s", error)
    return Response(200, "text/plain", f"Command sent: {body}")


def make_server(robot: CommandSink, host: str = "", port: int = 80) -> HTTPServer:
    """Create (but do not start) an HTTP server serving the page and the command endpoint."""

    class Handler(BaseHTTPRequestHandler):
        def _route(self) -> str:
            return urlsplit(self.path).path

        def _reply(self, response: Response) -> None:
            payload = response.body.encode("utf-8")
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def _not_found(self) -> None:
            self._reply(Response(404, "text/plain", f"Not found: {self._route()}"))

        def _read_body(self) -> str | None:
            try:
                length = int(self.headers.get("Content-Length", ""))
            except ValueError:
                return None
            if length <= 0:
                return None
            return self.rfile.read(length).decode("utf-8", errors="replace")

        def do_GET(self) -> None:  # noqa: N802
            if self._route() == "/":
                self._reply(Response(200, "text/html", render_page()))
            else:
                self._not_found()

        def do_POST(self) -> None:  # noqa: N802
            if self._route() == "/command":
                self._reply(handle_command(robot, self._read_body()))
            else:
                self._not_found()

        def log_message(self, format: str, *args) -> None:  # noqa: A002
            log.debug("%s - %s", self.address_string(), format % args)

    return HTTPServer((host, port), Handler)