"""Logger that appends to a file and archives it once it grows too large."""

from __future__ import annotations

import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from slfmt.files import clear_file, compress_file, move_file_to_dir
from slfmt.level import Level
from slfmt.logger_base import LoggerBase

PathLike = Union[str, os.PathLike]

DEFAULT_FILE_SIZE = 1024 * 1024 * 5
MIN_FILE_SIZE = 1024 * 1024
DEFAULT_BACKUP_DIR = Path("logs")


def backup_file_name(file: PathLike, now: Optional[datetime] = None) -> str:
    """Return ``<stem>_YYYY-MM-DD_HH-MM-SS`` for ``file`` at ``now`` (default: local time)."""
    if now is None:
        now = datetime.now()
    return f"{Path(file).stem}_{now.strftime('%Y-%m-%d_%H-%M-%S')}"


class RollingFileLogger(LoggerBase):
    """Appends lines to ``file``; when it reaches the size limit it is zipped
    into the backup directory and started afresh.

    Limits below :data:`MIN_FILE_SIZE` are raised to it, with a warning logged.
    """

    DEFAULT_FILE_SIZE = DEFAULT_FILE_SIZE
    MIN_FILE_SIZE = MIN_FILE_SIZE

    def __init__(
        self,
        clazz: str,
        file: PathLike,
        file_size: int = DEFAULT_FILE_SIZE,
        backup_dir: PathLike = DEFAULT_BACKUP_DIR,
    ) -> None:
        super().__init__(clazz)
        self.path = Path(file)
        self.backup_dir = Path(backup_dir)
        self.file_size_limit = file_size
        self.current_file_size = 0
        self._lock = threading.RLock()

        self.backup_dir.mkdir(parents=True, exist_ok=True)
        self._stream = self._open()

        if file_size < MIN_FILE_SIZE:
            self.warn(
                "Specified file size is too small. Using the minimum allowed size ({} MB).",
                MIN_FILE_SIZE // 1024 // 1024,
            )
            self.file_size_limit = MIN_FILE_SIZE

        if self.path.exists():
            self.current_file_size = self.path.stat().st_size
            if self.current_file_size >= self.file_size_limit:
                self._create_backup()
                self.current_file_size = 0

    def _open(self):
        return open(self.path, "a", encoding="utf-8", newline="")

    def emit(self, level: Level, message: str) -> None:
        line = self._format_line(level, message)
        with self._lock:
            self._stream.write(line)
            self._stream.flush()
            self.current_file_size += len(line.encode("utf-8"))
            self._check_and_backup()

    def _check_and_backup(self) -> None:
        if self.current_file_size < self.file_size_limit:
            return
        self._stream.close()
        self._create_backup()
        self._stream = self._open()
        self.current_file_size = 0

    def _create_backup(self) -> None:
        name = backup_file_name(self.path)
        archive = compress_file(self.path, str(self.path.parent / name))
        move_file_to_dir(archive, self.backup_dir)
        clear_file(self.path)

    def close(self) -> None:
        with self._lock:
            if not self._stream.closed:
                self._stream.flush()
                self._stream.close()