"""Logger that prints coloured lines to the terminal."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from slfmt.color import style_for_level
from slfmt.level import Level
from slfmt.logger_base import LoggerBase


class ConsoleLogger(LoggerBase):
    """Writes each line, styled by level, to ``stream`` (standard output by default)."""

    def __init__(self, clazz: str, stream: Optional[TextIO] = None) -> None:
        super().__init__(clazz)
        self._stream = stream

    def emit(self, level: Level, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(style_for_level(level).apply(self._format_line(level, message)))
        stream.flush()