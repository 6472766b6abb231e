import io

import pytest

from takc.terminal import (
    Background,
    Foreground,
    Style,
    bold,
    bold_underline,
    red_bold,
    reset,
    set_background,
    set_foreground,
    set_style,
    styled_print,
    underline,
)


@pytest.fixture
def stream():
    return io.StringIO()


def test_foreground_none_writes_nothing(stream):
    set_foreground(Foreground.NONE, stream)
    assert stream.getvalue() == ""


@pytest.mark.parametrize("color", [c for c in Foreground if c is not Foreground.NONE])
def test_foreground_escape(stream, color):
    set_foreground(color, stream)
    assert stream.getvalue() == f"\x1b[{color.value}m"


@pytest.mark.parametrize("color", [c for c in Background if c is not Background.NONE])
def test_background_escape(stream, color):
    set_background(color, stream)
    assert stream.getvalue() == f"\x1b[{color.value}m"


def test_background_none_writes_nothing(stream):
    set_background(Background.NONE, stream)
    assert stream.getvalue() == ""


def test_style_all_bits_in_order(stream):
    set_style(Style.UNDERLINE | Style.BOLD | Style.ITALIC, stream)
    assert stream.getvalue() == "\x1b[1m" + "\x1b[3m" + "\x1b[4m"


def test_style_none_writes_nothing(stream):
    set_style(Style.NONE, stream)
    assert stream.getvalue() == ""


def test_reset(stream):
    reset(stream)
    assert stream.getvalue() == "\x1b[m"


def test_plain_print_has_no_escapes(stream):
    styled_print("hello", stream=stream)
    assert stream.getvalue() == "hello\n"


def test_red_bold_wraps_message(stream):
    red_bold("oops", stream)
    value = stream.getvalue()
    assert value.startswith(f"\x1b[{Foreground.RED.value}m\x1b[1m")
    assert value.endswith("oops\n\x1b[m")


def test_bold(stream):
    bold("x", stream)
    assert stream.getvalue() == "\x1b[1m" + "x\n" + "\x1b[m"


def test_underline(stream):
    underline("y", stream)
    assert stream.getvalue() == "\x1b[4m" + "y\n" + "\x1b[m"


def test_bold_underline(stream):
    bold_underline("z", stream)
    assert stream.getvalue() == "\x1b[1m\x1b[4m" + "z\n" + "\x1b[m"


def test_all_settings_order(stream):
    styled_print("m", Foreground.GREEN, Background.BLUE, Style.BOLD, stream)
    expected = (
        f"\x1b[{Foreground.GREEN.value}m"
        f"\x1b[{Background.BLUE.value}m"
        "\x1b[1m"
        "m\n"
        "\x1b[m"
    )
    assert stream.getvalue() == expected