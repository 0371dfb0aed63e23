import pytest

from slfmt.level import (
    FATAL_LEVEL_STRING,
    INFO_LEVEL_STRING,
    UNKNOWN_LEVEL_STRING,
    Level,
    level_to_string,
    string_to_level,
)

KNOWN = [lvl for lvl in Level if lvl is not Level.UNKNOWN]


@pytest.mark.parametrize("level", KNOWN)
def test_round_trip(level):
    assert string_to_level(level_to_string(level)) is level


def test_known_names():
    assert level_to_string(Level.INFO) == INFO_LEVEL_STRING
    assert level_to_string(Level.FATAL) == FATAL_LEVEL_STRING


def test_unknown_level_name():
    assert level_to_string(Level.UNKNOWN) == UNKNOWN_LEVEL_STRING


def test_non_level_is_unknown():
    assert level_to_string(42) == UNKNOWN_LEVEL_STRING


@pytest.mark.parametrize("text", ["nonsense", "", "info", " INFO"])
def test_unrecognised_strings(text):
    assert string_to_level(text) is Level.UNKNOWN


def test_ordering():
    names = ["FATAL", "TRACE", "WARN", "DEBUG", "ERROR", "INFO"]
    ordered = sorted(string_to_level(name) for name in names)
    assert [level_to_string(level) for level in ordered] == [
        "TRACE",
        "DEBUG",
        "INFO",
        "WARN",
        "ERROR",
        "FATAL",
    ]


def test_str_uses_name():
    assert str(Level.WARN) == level_to_string(Level.WARN)