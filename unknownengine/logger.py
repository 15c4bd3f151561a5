"""Console logger that keeps a history of the lines it has written."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, TextIO


class LogLevel(Enum):
    """Severity of a log line."""

    INFO = "INFO"
    WARN = "WARN"
    ERR = "ERR"


class AnsiColor(IntEnum):
    """ANSI escape colour codes."""

    BLACK_FG = 30
    BLACK_BG = 40
    RED_FG = 31
    RED_BG = 41
    GREEN_FG = 32
    GREEN_BG = 42
    YELLOW_FG = 33
    YELLOW_BG = 43
    BLUE_FG = 34
    BLUE_BG = 44
    MAGENTA_FG = 35
    MAGENTA_BG = 45
    CYAN_FG = 36
    CYAN_BG = 46
    WHITE_FG = 37
    WHITE_BG = 47
    BRIGHT_BLACK_FG = 90
    BRIGHT_BLACK_BG = 100
    BRIGHT_RED_FG = 91
    BRIGHT_RED_BG = 101
    BRIGHT_GREEN_FG = 92
    BRIGHT_GREEN_BG = 102
    BRIGHT_YELLOW_FG = 93
    BRIGHT_YELLOW_BG = 103
    BRIGHT_BLUE_FG = 94
    BRIGHT_BLUE_BG = 104
    BRIGHT_MAGENTA_FG = 95
    BRIGHT_MAGENTA_BG = 105
    BRIGHT_CYAN_FG = 96
    BRIGHT_CYAN_BG = 106
    BRIGHT_WHITE_FG = 97
    BRIGHT_WHITE_BG = 107


@dataclass(frozen=True)
class LogLine:
    """One recorded log message."""

    level: LogLevel
    message: str


def format_color(text: str, color: int) -> str:
    """Wrap text in an ANSI colour escape sequence."""
    return f"\033[{int(color)}m{text}\033[0m"


def time_string(now: datetime | None = None) -> str:
    """Return the local time of day as HH:MM:SS."""
    if now is None:
        now = datetime.now()
    return f"{now.hour:02}:{now.minute:02}:{now.second:02}"


class Logger:
    """Writes formatted messages to a stream and records them."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lines: list[LogLine] = []

    @property
    def lines(self) -> tuple[LogLine, ...]:
        """All messages logged at INFO, WARN or ERR level, oldest first."""
        return tuple(self._lines)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, args, None)

    def warn(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARN, message, args, AnsiColor.BRIGHT_YELLOW_FG)

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERR, message, args, AnsiColor.BRIGHT_RED_FG)

    def todo(self, message: str, filename: str, line_number: int) -> None:
        """Print a reminder tagged with its location; it is not recorded."""
        text = f"[TODO in {filename}:{line_number}] {message}"
        self._write(format_color(text, AnsiColor.BRIGHT_BLUE_FG))

    def _log(
        self,
        level: LogLevel,
        message: str,
        args: tuple[Any, ...],
        color: AnsiColor | None,
    ) -> None:
        formatted = message.format(*args)
        final = f"[{time_string()} {level.value}]: {formatted}"
        self._lines.append(LogLine(level, final))
        self._write(final if color is None else format_color(final, color))

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()


_instance: Logger | None = None


def get_logger() -> Logger:
    """Return the process-wide logger."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance