"""Diagnostics for env file loading.

Loading a ``.env`` file never raises for a bad line or a missing file;
instead it reports what it skipped or overwrote.  Those reports go to a
**diagnostic sink**:

- **LogLevel** — how serious a report is, from DEBUG to ERROR.
- **LogEntry** — one report: level, message, and the loader stage.
- **DiagnosticSink** — the protocol any sink must satisfy.
- **Logger** — the default sink.  It keeps every entry and prints the
  ones at or above ``echo_level`` to a text stream (``sys.stderr``
  unless told otherwise).

``Logger(quiet=True)`` keeps entries without printing anything.
"""

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, TextIO


class LogLevel(IntEnum):
    """Severity of a loader diagnostic."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One diagnostic emitted while loading.

    Attributes:
        level: How serious the event is.
        message: What was skipped, overwritten, or missing.
        source: The loader stage: "locator", "parser", or "injector".

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``py_envfile.<source>: <level>: <message>``."""
        return f"py_envfile.{self.source}: {self.level.name.lower()}: {self.message}"


class DiagnosticSink(Protocol):
    """Anything that can receive loader diagnostics."""

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Record one diagnostic."""
        ...  # pragma: no cover


class Logger:
    """Default sink: keeps every entry, echoes the serious ones."""

    def __init__(
        self,
        *,
        stream: TextIO | None = None,
        echo_level: LogLevel = LogLevel.WARNING,
        quiet: bool = False,
    ) -> None:
        """Create a logger with no entries.

        Args:
            stream: Where to echo entries (``sys.stderr`` at echo time if None).
            echo_level: Minimum level that is echoed.
            quiet: If True, never echo; entries are only kept.

        """
        self._entries: list[LogEntry] = []
        self._stream = stream
        self._echo_level = echo_level
        self._quiet = quiet

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Keep one diagnostic and echo it if it reaches ``echo_level``."""
        entry = LogEntry(level=level, message=message, source=source)
        self._entries.append(entry)
        if not self._quiet and level >= self._echo_level:
            stream = self._stream if self._stream is not None else sys.stderr
            print(entry, file=stream)
