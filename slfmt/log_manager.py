"""Factory functions for the available loggers."""

from __future__ import annotations

import os
from typing import Union

from slfmt.combined_logger import CombinedLogger
from slfmt.console_logger import ConsoleLogger
from slfmt.file_logger import FileLogger
from slfmt.logger_base import LoggerBase
from slfmt.rolling_file_logger import DEFAULT_FILE_SIZE, RollingFileLogger

PathLike = Union[str, os.PathLike]

DEFAULT_LOGGER_FILENAME = "app.log"


def get_logger(clazz: str) -> LoggerBase:
    """Return the default logger for ``clazz``: a console logger."""
    return get_console_logger(clazz)


def get_console_logger(clazz: str) -> ConsoleLogger:
    """Return a logger printing to standard output."""
    return ConsoleLogger(clazz)


def get_file_logger(clazz: str, file: PathLike = DEFAULT_LOGGER_FILENAME) -> FileLogger:
    """Return a logger appending to ``file``."""
    return FileLogger(clazz, file)


def get_rolling_file_logger(
    clazz: str, file: PathLike, file_size: int = DEFAULT_FILE_SIZE
) -> RollingFileLogger:
    """Return a logger that archives ``file`` once it reaches ``file_size`` bytes."""
    return RollingFileLogger(clazz, file, file_size)


def get_combined_logger(clazz: str, *args: LoggerBase) -> CombinedLogger:
    """Return a logger forwarding every message to each of ``args``."""
    return CombinedLogger(clazz, args)