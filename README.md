# robocontrol

Tools for a Robosapien toy robot. The package holds the robot's full command
set. It turns each command into the timed line levels that the robot's
infrared receiver expects. It also serves a small web page with one button per
command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

`robocontrol.commands.RoboCommand` is an `IntEnum` with one member for each
command byte the robot understands. The groups are:

- movement, `0x80`–`0x8E`
- programming, `0x90`–`0x94`
- green shift, `0xA0`–`0xAE`
- orange shift, `0xC0`–`0xD4`

Each member has a `label` property with its display name, for example
`"Right Hand Strike 3"`. `command_name(command)` accepts any integer. It
returns the label of the matching command, or `"Unknown Command"` when no
command matches.

```python
from robocontrol.commands import RoboCommand, command_name

print(command_name(RoboCommand.HIGH_FIVE))   # High Five
print(command_name(0x00))                    # Unknown Command
```

## Encoding and sending

A command is sent one bit at a time, most significant bit first. The timing is
counted in ticks of 833 µs (1/1200 s):

| Part of the signal | Line level and length |
|---|---|
| Start | low for 8 ticks |
| `1` bit | high for 4 ticks, then low for 1 tick |
| `0` bit | high for 1 tick, then low for 1 tick |

`robocontrol.controller.encode(command)` returns this signal as a list of
`(Level, ticks)` pairs. `Level` has the two members `LOW` and `HIGH`. A value
outside `0`–`255`, or a value whose top bit is clear, raises `ValueError`.

`RobosapiensController(line, delay=...)` drives any object that has a
`write(level)` method:

- `begin()` sets the line high, which is its idle state.
- `send_command(command)` writes each level of the encoded signal and waits
  `ticks × 833` µs after each write. It then sets the line high again and
  waits a further 1000 µs.

By default the waits use `time.sleep`. Pass your own `delay` callable if you
need different waits. It takes microseconds as its one argument.

`RecordingLine` keeps every level written to it in its `levels` list, so you
can inspect a signal:

```python
from robocontrol.commands import RoboCommand
from robocontrol.controller import RecordingLine, RobosapiensController

line = RecordingLine()
robot = RobosapiensController(line, delay=lambda microseconds: None)
robot.begin()
robot.send_command(RoboCommand.WALK_FORWARD)
print(line.levels)
```

## Web control

`robocontrol.webserver` provides the control page and its request handling:

- `render_page()` returns the page as HTML. The top row has the Walk Forward,
  Stop and Walk Backward buttons. Below it are three columns: commands with
  "Left" in their name, commands with neither "Left" nor "Right", and commands
  with "Right".
- Each button POSTs its command's decimal number as the request body to
  `/command`.
- `handle_command(robot, body)` reads the leading integer of the body. Text
  without one counts as 0. It keeps the low eight bits and passes the value to
  `robot.send_command`, then returns a `Response` with status 200 and the text
  `Command sent: <body>`. If the robot rejects the value with `ValueError`,
  the error is logged and the reply is still 200. An empty or missing body
  gives status 400 with `Bad Request: No command received.`
- `make_server(robot, host="", port=80)` returns an `http.server.HTTPServer`
  that is not yet started. It answers `GET /` with the page and
  `POST /command` with `handle_command`. Any other path gets a 404 reply.

## Command line

```
robocontrol [--host HOST] [--port PORT] [-v]
```

The command listens on `0.0.0.0` port `80` unless told otherwise. Before
serving, it calls `robocontrol.app.startup(robot)`. That calls `begin()`, sends
Whistle, and then sends High Five and Talkback. The page is then served until
the process is interrupted. `-v` turns on debug logging, which includes every
line level written.

## What the package does not do

- The `robocontrol` command does not drive any hardware. Its controller writes
  each line level to the log and nothing else. To drive a real output, build a
  `RobosapiensController` around your own object with a `write(level)` method,
  then pass it to `startup` and `make_server`.
- The package does not manage network connectivity. It does not join Wi-Fi,
  open an access point or announce itself by name. It only listens on the
  address it is given.