import pytest

from slfmt.color import (
    BOLD,
    ERROR_COLOR,
    FATAL_COLOR,
    INFO_COLOR,
    NO_COLOR,
    RED,
    UNDERLINE,
    WARN_COLOR,
    YELLOW,
    Emphasis,
    TextStyle,
    style_for_level,
)
from slfmt.level import Level


def test_no_color_leaves_text_unchanged():
    assert NO_COLOR.apply("plain text") == "plain text"


def test_foreground_escape():
    assert TextStyle(foreground=(255, 0, 0)).apply("x") == "\x1b[38;2;255;0;0mx\x1b[0m"


def test_background_escape():
    assert TextStyle(background=(0, 0, 0)).apply("x") == "\x1b[48;2;0;0;0mx\x1b[0m"


def test_bold_escape():
    assert TextStyle(emphasis=Emphasis.BOLD).apply("x") == "\x1b[1mx\x1b[0m"


def test_styled_text_contains_original():
    styled = TextStyle(foreground=(1, 2, 3), emphasis=Emphasis.ITALIC).apply("hello")
    assert "hello" in styled
    assert len(styled) > len("hello")


def test_or_combines_parts():
    combined = TextStyle(foreground=(1, 2, 3)) | TextStyle(emphasis=Emphasis.UNDERLINE)
    assert combined.foreground == (1, 2, 3)
    assert combined.background is None
    assert combined.emphasis == Emphasis.UNDERLINE


def test_or_is_idempotent():
    style = TextStyle(foreground=(10, 20, 30), background=(4, 5, 6), emphasis=Emphasis.BOLD)
    assert style | style == style


def test_or_unions_emphasis():
    combined = TextStyle(emphasis=Emphasis.BOLD) | TextStyle(emphasis=Emphasis.UNDERLINE)
    assert Emphasis.BOLD in combined.emphasis
    assert Emphasis.UNDERLINE in combined.emphasis


def test_or_with_no_color_is_identity():
    style = TextStyle(foreground=(7, 8, 9))
    assert style | NO_COLOR == style
    assert NO_COLOR | style == style


def test_or_with_other_type_raises():
    with pytest.raises(TypeError):
        TextStyle() | 3


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.INFO, INFO_COLOR),
        (Level.WARN, YELLOW),
        (Level.ERROR, RED),
        (Level.UNKNOWN, NO_COLOR),
    ],
)
def test_style_for_level(level, expected):
    assert style_for_level(level) == expected


def test_fatal_style():
    assert style_for_level(Level.FATAL) == FATAL_COLOR
    assert FATAL_COLOR == RED | BOLD | UNDERLINE


def test_level_styles_agree_with_constants():
    assert style_for_level(Level.WARN) == WARN_COLOR
    assert style_for_level(Level.ERROR) == ERROR_COLOR