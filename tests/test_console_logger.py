import io

import pytest

from slfmt.color import style_for_level
from slfmt.level import Level
from slfmt.log_format import LogFormat, get_log_format, set_log_format
from slfmt.console_logger import ConsoleLogger


@pytest.fixture
def plain_format():
    previous = get_log_format()
    set_log_format(LogFormat("{L} {C} {M}\n"))
    yield get_log_format()
    set_log_format(previous)


def test_source_logger_prints_message(capsys):
    logger = ConsoleLogger("TestClass")
    logger.info("Test")
    out = capsys.readouterr().out
    assert "Test" in out
    assert "(TestClass)" in out
    assert "INFO" in out


@pytest.mark.parametrize(
    "level",
    [Level.TRACE, Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL],
)
def test_line_is_styled_by_level(plain_format, level):
    stream = io.StringIO()
    logger = ConsoleLogger("Foo", stream)
    logger.log(level, "hello {}", "world")
    line = plain_format.format({"{L}": str(level), "{C}": "Foo", "{M}": "hello world"})
    assert stream.getvalue() == style_for_level(level).apply(line)


def test_plain_line_content(plain_format):
    stream = io.StringIO()
    ConsoleLogger("Foo", stream).warn("careful")
    assert "WARN Foo careful\n" in stream.getvalue()


def test_lines_accumulate_in_order(plain_format):
    stream = io.StringIO()
    logger = ConsoleLogger("Foo", stream)
    logger.info("first")
    logger.error("second")
    out = stream.getvalue()
    assert out.index("first") < out.index("second")


def test_unknown_level_prints_nothing(plain_format):
    stream = io.StringIO()
    ConsoleLogger("Foo", stream).log(Level.UNKNOWN, "nothing")
    assert stream.getvalue() == ""