"""Log line layout shared by all loggers."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Mapping, Optional, Tuple


def timestamp_string(now: Optional[datetime] = None) -> str:
    """Return ``now`` (default: the local time) as ``YYYY-MM-DD HH:MM:SS,mmm``."""
    if now is None:
        now = datetime.now()
    return f"{now.strftime('%Y-%m-%d %H:%M:%S')},{now.microsecond // 1000:03d}"


def thread_id_string() -> str:
    """Return the identifier of the calling thread as a string."""
    return str(threading.get_ident())


@dataclass(frozen=True)
class LogFormat:
    """A line template with ``{}`` slots filled, in order, by its functions."""

    format_string: str = ""
    functions: Tuple[Callable[[], str], ...] = ()

    def format(self, replaces: Mapping[str, str]) -> str:
        """Fill the slots, then replace the first occurrence of each key.

        Raises ValueError when a slot or a key is missing from the template.
        """
        formatted = self.format_string
        for function in self.functions:
            if "{}" not in formatted:
                raise ValueError("log format has fewer slots than fields")
            formatted = formatted.replace("{}", function(), 1)
        for key, value in replaces.items():
            if key not in formatted:
                raise ValueError(f"placeholder {key!r} not found in log format")
            formatted = formatted.replace(key, value, 1)
        return formatted

    def is_empty(self) -> bool:
        return self.format_string == ""


class LogFormatBuilder:
    """Builds a LogFormat field by field; fields are separated by spaces."""

    def __init__(self) -> None:
        self._formats: List[str] = []
        self._functions: List[Callable[[], str]] = []

    def _add(self, left: str, right: str, function: Callable[[], str]) -> LogFormatBuilder:
        self._formats.append(f"{left}{{}}{right}")
        self._functions.append(function)
        return self

    def timestamp(self, left: str = "", right: str = "") -> LogFormatBuilder:
        return self._add(left, right, lambda: timestamp_string())

    def level(self, left: str = "", right: str = "") -> LogFormatBuilder:
        return self._add(left, right, lambda: "{L}")

    def class_name(self, left: str = "(", right: str = ")") -> LogFormatBuilder:
        return self._add(left, right, lambda: "{C}")

    def thread_id(self, left: str = "[Thread-", right: str = "]") -> LogFormatBuilder:
        return self._add(left, right, thread_id_string)

    def message(self, left: str = "", right: str = "") -> LogFormatBuilder:
        return self._add(left, right, lambda: "{M}")

    def build(self) -> LogFormat:
        return LogFormat(" ".join(self._formats) + "\n", tuple(self._functions))


_lock = threading.Lock()
_current: Optional[LogFormat] = None


def _default_format() -> LogFormat:
    return LogFormatBuilder().timestamp().level().class_name().thread_id().message().build()


def get_log_format() -> LogFormat:
    """Return the shared log format, installing the default when none is set."""
    global _current
    with _lock:
        if _current is None or _current.is_empty():
            _current = _default_format()
        return _current


def set_log_format(log_format: LogFormat) -> None:
    """Replace the shared log format used by every logger."""
    global _current
    with _lock:
        _current = log_format