"""Module-tagged log messages routed to one global, level-filtered listener."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass


class LogLevel(enum.IntFlag):
    """Log levels; a listener subscribes to any combination of them."""

    LOG_ERROR = 0x01
    LOG_WARNING = 0x02
    LOG_INFO_0 = 0x04
    LOG_INFO_1 = 0x08
    LOG_INFO_2 = 0x10
    LOG_INFO_3 = 0x20
    LOG_ALL = 0x3F


_PREFIXES = {
    LogLevel.LOG_ERROR: "ERROR:   ",
    LogLevel.LOG_WARNING: "WARNING: ",
    LogLevel.LOG_INFO_0: "INFO:    ",
    LogLevel.LOG_INFO_1: "INFO:    ",
    LogLevel.LOG_INFO_2: "INFO:    ",
    LogLevel.LOG_INFO_3: "INFO:    ",
}
_UNKNOWN_PREFIX = "UNKNOWN: "


class LogListener:
    """Receives formatted log messages; by default writes them to a stream."""

    def __init__(self, stream=None):
        self.stream = stream

    def log_msg(self, text, level):
        """Handle one fully formatted, newline-terminated message."""
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(text)


@dataclass
class _ListenerEntry:
    listener: LogListener
    level: LogLevel


_listener_entry: _ListenerEntry | None = None


def set_log_listener(listener, level):
    """Install the global listener for the given levels; ``None`` removes it."""
    global _listener_entry
    if listener is None:
        _listener_entry = None
    else:
        _listener_entry = _ListenerEntry(listener, LogLevel(level))


class Logger:
    """A logger that tags each message with the name of its module."""

    def __init__(self, module_name):
        self.module_name = str(module_name)

    def print(self, level, message, *args):
        """Format and emit a message; ``args`` are applied printf-style."""
        body = message % args if args else message
        text = f"{_PREFIXES.get(level, _UNKNOWN_PREFIX)}{self.module_name}: {body}"
        if not text.endswith("\n"):
            text += "\n"

        entry = _listener_entry
        if entry is not None:
            if level & entry.level:
                entry.listener.log_msg(text, level)
        else:
            sys.stderr.write(text)