"""Log levels and their textual names."""

from enum import IntEnum

TRACE_LEVEL_STRING = "TRACE"
DEBUG_LEVEL_STRING = "DEBUG"
INFO_LEVEL_STRING = "INFO"
WARN_LEVEL_STRING = "WARN"
ERROR_LEVEL_STRING = "ERROR"
FATAL_LEVEL_STRING = "FATAL"
UNKNOWN_LEVEL_STRING = "UNKNOWN"


class Level(IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    UNKNOWN = 6

    def __str__(self) -> str:
        return level_to_string(self)


_NAMES = {
    Level.TRACE: TRACE_LEVEL_STRING,
    Level.DEBUG: DEBUG_LEVEL_STRING,
    Level.INFO: INFO_LEVEL_STRING,
    Level.WARN: WARN_LEVEL_STRING,
    Level.ERROR: ERROR_LEVEL_STRING,
    Level.FATAL: FATAL_LEVEL_STRING,
}

_LEVELS = {name: level for level, name in _NAMES.items()}


def level_to_string(level) -> str:
    """Return the name of ``level``; anything unrecognised is ``UNKNOWN``."""
    if not isinstance(level, Level):
        return UNKNOWN_LEVEL_STRING
    return _NAMES.get(level, UNKNOWN_LEVEL_STRING)


def string_to_level(text: str) -> Level:
    """Return the level named exactly ``text``, or ``Level.UNKNOWN``."""
    return _LEVELS.get(text, Level.UNKNOWN)