"""Abstract logger with one entry point per severity level."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from slfmt.level import Level, level_to_string
from slfmt.log_format import get_log_format

_LOGGABLE = frozenset(
    {Level.TRACE, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL}
)


class LoggerBase(ABC):
    """Formats messages with ``str.format`` and hands them to :meth:`emit`.

    Subclasses decide where a finished message goes by implementing ``emit``.
    """

    def __init__(self, clazz: str) -> None:
        self.clazz = str(clazz)

    def _format_line(self, level: Level, message: str) -> str:
        """Render one log line using the shared log format."""
        return get_log_format().format(
            {
                "{L}": level_to_string(level),
                "{C}": self.clazz,
                "{M}": message,
            }
        )

    @abstractmethod
    def emit(self, level: Level, message: str) -> None:
        """Write an already formatted message at ``level``."""

    def log(self, level: Level, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Log at ``level``; levels outside TRACE..FATAL are ignored.

        The message is formatted first, so a bad format string raises even
        when the level is ignored.
        """
        message = fmt.format(*args, **kwargs)
        if level in _LOGGABLE:
            self.emit(Level(level), message)

    def trace(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.TRACE, fmt.format(*args, **kwargs))

    def debug(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.DEBUG, fmt.format(*args, **kwargs))

    def info(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.INFO, fmt.format(*args, **kwargs))

    def warn(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.WARN, fmt.format(*args, **kwargs))

    def error(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.ERROR, fmt.format(*args, **kwargs))

    def fatal(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        self.emit(Level.FATAL, fmt.format(*args, **kwargs))

    def close(self) -> None:
        """Release any resources held by the logger."""

    def __enter__(self) -> LoggerBase:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()