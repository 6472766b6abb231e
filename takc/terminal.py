"""Coloured and styled terminal output using ANSI escape sequences."""

from __future__ import annotations

import sys
from enum import IntEnum, IntFlag
from typing import TextIO, Optional


class Foreground(IntEnum):
    """Foreground colour codes."""

    NONE = 0
    BLACK = 30
    RED = 91  # bright red
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class Background(IntEnum):
    """Background colour codes."""

    NONE = 0
    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    WHITE = 47


class Style(IntFlag):
    """Text style bits; they may be combined."""

    NONE = 0
    BOLD = 1
    ITALIC = 1 << 1  # not supported by every terminal
    UNDERLINE = 1 << 2


_STYLE_CODES = (
    (Style.BOLD, "\x1b[1m"),
    (Style.ITALIC, "\x1b[3m"),
    (Style.UNDERLINE, "\x1b[4m"),
)


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def set_foreground(color: Foreground, stream: Optional[TextIO] = None) -> None:
    """Switch the terminal foreground colour."""
    color = Foreground(color)
    if color is Foreground.NONE:
        return
    _out(stream).write(f"\x1b[{int(color)}m")


def set_background(color: Background, stream: Optional[TextIO] = None) -> None:
    """Switch the terminal background colour."""
    color = Background(color)
    if color is Background.NONE:
        return
    _out(stream).write(f"\x1b[{int(color)}m")


def set_style(style: Style, stream: Optional[TextIO] = None) -> None:
    """Apply the text styles set in ``style``."""
    style = Style(style)
    if style == Style.NONE:
        return
    out = _out(stream)
    for bit, code in _STYLE_CODES:
        if style & bit:
            out.write(code)


def reset(stream: Optional[TextIO] = None) -> None:
    """Clear any colour or style previously applied."""
    _out(stream).write("\x1b[m")


def styled_print(
    message: str,
    fg: Foreground = Foreground.NONE,
    bg: Background = Background.NONE,
    style: Style = Style.NONE,
    stream: Optional[TextIO] = None,
) -> None:
    """Print ``message`` on its own line with the given colours and style."""
    out = _out(stream)
    changed = False
    if Foreground(fg) is not Foreground.NONE:
        set_foreground(fg, out)
        changed = True
    if Background(bg) is not Background.NONE:
        set_background(bg, out)
        changed = True
    if Style(style) != Style.NONE:
        set_style(style, out)
        changed = True

    out.write(f"{message}\n")
    out.flush()

    if changed:
        reset(out)


def underline(message: str, stream: Optional[TextIO] = None) -> None:
    """Print an underlined line."""
    styled_print(message, style=Style.UNDERLINE, stream=stream)


def bold(message: str, stream: Optional[TextIO] = None) -> None:
    """Print a bold line."""
    styled_print(message, style=Style.BOLD, stream=stream)


def bold_underline(message: str, stream: Optional[TextIO] = None) -> None:
    """Print a bold, underlined line."""
    styled_print(message, style=Style.BOLD | Style.UNDERLINE, stream=stream)


def red_bold(message: str, stream: Optional[TextIO] = None) -> None:
    """Print a bold line in bright red."""
    styled_print(message, fg=Foreground.RED, style=Style.BOLD, stream=stream)