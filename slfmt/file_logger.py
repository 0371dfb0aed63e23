"""Logger that appends lines to a file."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Union

from slfmt.level import Level
from slfmt.logger_base import LoggerBase


class FileLogger(LoggerBase):
    """Appends each line to ``file`` and flushes it straight away.

    The file is opened in append mode, so several loggers may share it.
    """

    def __init__(self, clazz: str, file: Union[str, os.PathLike]) -> None:
        super().__init__(clazz)
        self.path = Path(file)
        self._stream = open(self.path, "a", encoding="utf-8")
        self._lock = threading.Lock()

    def emit(self, level: Level, message: str) -> None:
        line = self._format_line(level, message)
        with self._lock:
            self._stream.write(line)
            self._stream.flush()

    def close(self) -> None:
        with self._lock:
            if not self._stream.closed:
                self._stream.flush()
                self._stream.close()