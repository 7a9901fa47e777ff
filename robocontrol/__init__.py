"""Robosapien command set, line-signal encoder, web control page and command-line server."""

__version__ = "0.1.0"
__all__ = ["app", "commands", "controller", "webserver"]