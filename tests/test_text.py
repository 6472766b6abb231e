import pytest

from takc.text import (
    InternalError,
    actual_char,
    actual_string,
    escaped_char,
    panic,
    remove_escaped_chars,
    split_string,
)


def test_panic_raises_with_message():
    with pytest.raises(InternalError, match="boom"):
        panic("boom")


@pytest.mark.parametrize(
    "real,expected",
    [("n", "\n"), ("t", "\t"), ("0", "\0"), ("\\", "\\"), ("`", "`"), ('"', '"'), ("'", "'")],
)
def test_escaped_char(real, expected):
    assert escaped_char(real) == expected


def test_escaped_char_unknown():
    assert escaped_char("q") is None


def test_remove_escapes_regular():
    assert remove_escaped_chars('"a\\nb\\tc"') == '"a\nb\tc"'


def test_remove_escapes_unknown_escape():
    assert remove_escaped_chars('"a\\qb"') is None


def test_remove_escapes_trailing_backslash():
    assert remove_escaped_chars('"a\\') is None


def test_remove_escapes_raw_keeps_backslashes():
    raw = "`a\\nb\\\\c`"
    assert remove_escaped_chars(raw) == raw


def test_remove_escapes_raw_backtick_escape():
    assert remove_escaped_chars("`a\\`b`") == "`a`b`"


def test_remove_escapes_passes_unicode():
    assert remove_escaped_chars('"héllo ✓"') == '"héllo ✓"'


def test_remove_escapes_empty_raises():
    with pytest.raises(ValueError):
        remove_escaped_chars("")


def test_plain_text_round_trips():
    for text in ['"abc"', "'x'", "`raw`", '"spaces and ; symbols"']:
        assert remove_escaped_chars(text) == text


def test_actual_string():
    assert actual_string('"hi\\n"') == "hi\n"
    assert actual_string('"hello"') == "hello"


def test_actual_string_too_short():
    assert actual_string('""') is None


def test_actual_string_bad_escape():
    assert actual_string('"\\z"') is None


def test_actual_char():
    assert actual_char("'a'") == "a"
    assert actual_char("'\\n'") == "\n"
    assert actual_char("'\\0'") == "\0"


def test_actual_char_invalid():
    assert actual_char("''") is None
    assert actual_char("'\\y'") is None


def test_split_namespace_path():
    assert split_string("\\a\\b\\c", "\\") == ["a", "b", "c"]


def test_split_drops_empty_pieces():
    assert split_string("a..b.", ".") == ["a", "b"]


def test_split_only_delim():
    assert split_string("\\", "\\") == []


def test_split_rejoin_invariant():
    parts = split_string("one/two/three", "/")
    assert "/".join(parts) == "one/two/three"


def test_split_empty_panics():
    with pytest.raises(InternalError):
        split_string("", ".")


def test_split_bad_delimiter():
    with pytest.raises(ValueError):
        split_string("a::b", "::")