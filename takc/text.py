"""String helpers: escape handling for literals and path splitting."""

from __future__ import annotations

from typing import NoReturn, Optional


class InternalError(Exception):
    """An unrecoverable internal compiler error."""


def panic(message: str) -> NoReturn:
    """Abort with an internal error."""
    raise InternalError(message)


_ESCAPES = {
    "n": "\n",
    "b": "\b",
    "a": "\a",
    "r": "\r",
    "'": "'",
    "\\": "\\",
    "`": "`",
    '"': '"',
    "t": "\t",
    "0": "\0",
}


def escaped_char(real: str) -> Optional[str]:
    """Return the character that ``\\<real>`` stands for, or None."""
    return _ESCAPES.get(real)


def remove_escaped_chars(text: str) -> Optional[str]:
    """Resolve escape sequences in a literal, quotes included.

    In a raw literal (one starting with a backtick) only ``\\``` is an
    escape; other backslashes are kept. Returns None on an unknown escape.
    """
    if not text:
        raise ValueError("remove_escaped_chars: empty input.")

    is_raw = text[0] == "`"
    out: list[str] = []
    chars = iter(text)
    pending: Optional[str] = None

    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if is_raw and nxt != "`":
            out.append(ch)
            if nxt is not None:
                # the following character is ordinary unless it starts a new escape
                pending = nxt
                while pending == "\\":
                    after = next(chars, None)
                    if after == "`":
                        out.append("`")
                        pending = None
                        break
                    out.append("\\")
                    pending = after
                if pending is not None:
                    out.append(pending)
                    pending = None
            continue
        escaped = escaped_char(nxt) if nxt is not None else None
        if escaped is None:
            return None
        out.append(escaped)

    return "".join(out)


def actual_string(text: str) -> Optional[str]:
    """Return the contents of a quoted string literal with escapes resolved."""
    actual = remove_escaped_chars(text)
    if actual is None or len(actual) < 3:
        return None
    return actual[1:-1]


def actual_char(text: str) -> Optional[str]:
    """Return the character held by a quoted character literal."""
    actual = remove_escaped_chars(text)
    if actual is None or len(actual) < 3:
        return None
    return actual[1]


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty pieces."""
    if len(delim) != 1:
        raise ValueError("split_string: delimiter must be a single character.")
    if not text:
        panic("split_string: empty input.")
    return [chunk for chunk in text.split(delim) if chunk]