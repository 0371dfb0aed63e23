"""Logger that forwards every message to several loggers."""

from __future__ import annotations

from typing import Iterable, Tuple

from slfmt.level import Level
from slfmt.logger_base import LoggerBase


class CombinedLogger(LoggerBase):
    """Sends each message to all of its loggers, in the order given.

    The combined logger owns its loggers: closing it closes them.
    """

    def __init__(self, clazz: str, loggers: Iterable[LoggerBase]) -> None:
        super().__init__(clazz)
        self.loggers: Tuple[LoggerBase, ...] = tuple(loggers)

    def emit(self, level: Level, message: str) -> None:
        for logger in self.loggers:
            logger.emit(level, message)

    def close(self) -> None:
        for logger in self.loggers:
            logger.close()