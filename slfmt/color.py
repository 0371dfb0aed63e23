"""Terminal text styles used when printing log lines."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Flag
from typing import Optional, Tuple

from slfmt.level import Level

RGB = Tuple[int, int, int]

# Colours are switched off on Windows consoles.
_PLAIN = sys.platform == "win32"


class Emphasis(Flag):
    """Text emphasis attributes."""

    BOLD = 1
    FAINT = 2
    ITALIC = 4
    UNDERLINE = 8
    BLINK = 16
    REVERSE = 32
    CONCEAL = 64
    STRIKETHROUGH = 128


_EMPHASIS_CODES = {
    Emphasis.BOLD: 1,
    Emphasis.FAINT: 2,
    Emphasis.ITALIC: 3,
    Emphasis.UNDERLINE: 4,
    Emphasis.BLINK: 5,
    Emphasis.REVERSE: 7,
    Emphasis.CONCEAL: 8,
    Emphasis.STRIKETHROUGH: 9,
}

_RESET = "\x1b[0m"


def _merge(a: Optional[RGB], b: Optional[RGB]) -> Optional[RGB]:
    if a is None:
        return b
    if b is None:
        return a
    return (a[0] | b[0], a[1] | b[1], a[2] | b[2])


@dataclass(frozen=True)
class TextStyle:
    """A foreground colour, background colour and emphasis for terminal text."""

    foreground: Optional[RGB] = None
    background: Optional[RGB] = None
    emphasis: Emphasis = Emphasis(0)

    def apply(self, text: str) -> str:
        """Wrap ``text`` in the ANSI escapes for this style."""
        codes = [
            f"\x1b[{code}m"
            for flag, code in _EMPHASIS_CODES.items()
            if flag in self.emphasis
        ]
        if self.foreground is not None:
            r, g, b = self.foreground
            codes.append(f"\x1b[38;2;{r};{g};{b}m")
        if self.background is not None:
            r, g, b = self.background
            codes.append(f"\x1b[48;2;{r};{g};{b}m")
        if not codes:
            return text
        return "".join(codes) + text + _RESET

    def __or__(self, other: TextStyle) -> TextStyle:
        if not isinstance(other, TextStyle):
            return NotImplemented
        return TextStyle(
            _merge(self.foreground, other.foreground),
            _merge(self.background, other.background),
            self.emphasis | other.emphasis,
        )


NO_COLOR = TextStyle()


def _style(style: TextStyle) -> TextStyle:
    return NO_COLOR if _PLAIN else style


_RED = (255, 0, 0)
_GREEN = (0, 128, 0)
_CORNFLOWER_BLUE = (100, 149, 237)
_YELLOW = (255, 255, 0)
_CYAN = (0, 255, 255)
_MAGENTA = (255, 0, 255)
_WHITE = (255, 255, 255)
_GRAY = (128, 128, 128)
_BLACK = (0, 0, 0)

RED = _style(TextStyle(foreground=_RED))
GREEN = _style(TextStyle(foreground=_GREEN))
BLUE = _style(TextStyle(foreground=_CORNFLOWER_BLUE))
YELLOW = _style(TextStyle(foreground=_YELLOW))
CYAN = _style(TextStyle(foreground=_CYAN))
MAGENTA = _style(TextStyle(foreground=_MAGENTA))
WHITE = _style(TextStyle(foreground=_WHITE))
GRAY = _style(TextStyle(foreground=_GRAY))
BLACK = _style(TextStyle(foreground=_BLACK))

RED_BG = _style(TextStyle(background=_RED))
GREEN_BG = _style(TextStyle(background=_GREEN))
BLUE_BG = _style(TextStyle(background=_CORNFLOWER_BLUE))
YELLOW_BG = _style(TextStyle(background=_YELLOW))
CYAN_BG = _style(TextStyle(background=_CYAN))
MAGENTA_BG = _style(TextStyle(background=_MAGENTA))
WHITE_BG = _style(TextStyle(background=_WHITE))
GRAY_BG = _style(TextStyle(background=_GRAY))
BLACK_BG = _style(TextStyle(background=_BLACK))

BOLD = _style(TextStyle(emphasis=Emphasis.BOLD))
ITALIC = _style(TextStyle(emphasis=Emphasis.ITALIC))
UNDERLINE = _style(TextStyle(emphasis=Emphasis.UNDERLINE))
STRIKETHROUGH = _style(TextStyle(emphasis=Emphasis.STRIKETHROUGH))

TRACE_COLOR = WHITE
DEBUG_COLOR = MAGENTA
INFO_COLOR = BLUE
WARN_COLOR = YELLOW
ERROR_COLOR = RED
FATAL_COLOR = RED | BOLD | UNDERLINE

_LEVEL_STYLES = {
    Level.TRACE: TRACE_COLOR,
    Level.DEBUG: DEBUG_COLOR,
    Level.INFO: INFO_COLOR,
    Level.WARN: WARN_COLOR,
    Level.ERROR: ERROR_COLOR,
    Level.FATAL: FATAL_COLOR,
}


def style_for_level(level: Level) -> TextStyle:
    """Return the console style for ``level``; unknown levels are unstyled."""
    return _LEVEL_STYLES.get(level, NO_COLOR)