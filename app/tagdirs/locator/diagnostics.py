"""Diagnostics sinks for the locator.

The locator never writes to a global logger directly. It reports
skipped roots, matches, recursion steps, and fatal conditions through a
sink passed in by the caller. The default sink forwards to the standard
logging module.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol

# Below DEBUG; used for per-directory walk notices
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DiagnosticLevel = Literal["warn", "trace", "fatal"]


class Diagnostics(Protocol):
    """Channel receiving locator diagnostics.

    Messages use %-style formatting with lazy arguments, as with logging.
    """

    def warn(self, msg: str, *args: object) -> None: ...

    def trace(self, msg: str, *args: object) -> None: ...

    def fatal(self, msg: str, *args: object) -> None: ...


class LoggingDiagnostics:
    """Diagnostics sink backed by a standard library logger.

    Args:
        logger: Logger to write to. Defaults to the ``tagdirs.locator`` logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("tagdirs.locator")

    def warn(self, msg: str, *args: object) -> None:
        self._logger.warning(msg, *args)

    def trace(self, msg: str, *args: object) -> None:
        self._logger.log(TRACE, msg, *args)

    def fatal(self, msg: str, *args: object) -> None:
        self._logger.critical(msg, *args)


@dataclass(frozen=True, slots=True)
class DiagnosticMessage:
    """A single recorded diagnostic.

    Attributes:
        level: Severity ("warn", "trace" or "fatal").
        message: Fully formatted message text.
    """

    level: DiagnosticLevel
    message: str


@dataclass
class RecordingDiagnostics:
    """Diagnostics sink that keeps every message in memory."""

    messages: list[DiagnosticMessage] = field(default_factory=list)

    def _record(self, level: DiagnosticLevel, msg: str, args: tuple[object, ...]) -> None:
        self.messages.append(DiagnosticMessage(level=level, message=msg % args if args else msg))

    def warn(self, msg: str, *args: object) -> None:
        self._record("warn", msg, args)

    def trace(self, msg: str, *args: object) -> None:
        self._record("trace", msg, args)

    def fatal(self, msg: str, *args: object) -> None:
        self._record("fatal", msg, args)

    def of_level(self, level: DiagnosticLevel) -> list[str]:
        """Return the messages recorded at ``level``, in order."""
        return [m.message for m in self.messages if m.level == level]
