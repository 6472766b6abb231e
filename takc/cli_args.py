"""Command-line flag parsing for the compiler driver."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence, Union

ArgValue = Union[str, int, bool, None]
Predicate = Callable[[ArgValue], Optional[str]]

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_LEADING_INT = re.compile(r"-?\d+")
_VALUE_KINDS = (bool, int, str, None)
_KIND_NAMES = {bool: "Boolean", str: "String", int: "Integer"}


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT = _NoDefault()


class ArgumentError(Exception):
    """Base class for command-line parsing failures."""


class BadChunkError(ArgumentError):
    """A single command-line chunk could not be accepted."""

    def __init__(self, message: str, pos: int, rendered: str) -> None:
        super().__init__(rendered)
        self.message = message
        self.pos = pos
        self.rendered = rendered


class RequiredArgumentError(ArgumentError):
    """One or more required flags were not given."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class PredicateError(ArgumentError):
    """A flag's value was rejected by its predicate."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


def _kind_of(value: ArgValue) -> Optional[type]:
    if value is None:
        return None
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, str):
        return str
    raise TypeError(f"unsupported argument value {value!r}")


def to_i64(chunk: str) -> Optional[int]:
    """Read a signed 64-bit integer from the start of ``chunk``.

    Only digits and hyphens may appear; anything else, an empty chunk, a
    chunk not starting with a number, or a value out of range gives None.
    """
    if any(not (c.isascii() and c.isdigit()) and c != "-" for c in chunk):
        return None
    match = _LEADING_INT.match(chunk)
    if match is None:
        return None
    value = int(match.group())
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def to_bool(chunk: str) -> Optional[bool]:
    """Return True for "true", False for "false", otherwise None."""
    if chunk == "true":
        return True
    if chunk == "false":
        return False
    return None


@dataclass
class Argument:
    """A flag that was seen, with its value (None if it took none)."""

    value: ArgValue
    name: str
    pos: int = 0


@dataclass
class Parameter:
    """A flag the handler accepts.

    ``expected`` is ``bool``, ``int``, ``str``, or None for a flag that
    takes no value. ``predicate`` returns an error message or None.
    """

    longf: str
    shortf: str
    expected: Optional[type] = None
    description: str = ""
    required: bool = False
    predicate: Optional[Predicate] = None
    default: object = NO_DEFAULT

    def __post_init__(self) -> None:
        if not self.longf.startswith("--") or not self.shortf.startswith("-"):
            raise ValueError("Use UNIX-style argument syntax.")
        if self.expected not in _VALUE_KINDS:
            raise ValueError(f"unsupported expected type {self.expected!r}")
        if self.has_default and _kind_of(self.default) is not self.expected:  # type: ignore[arg-type]
            raise ValueError(f"default for {self.longf} does not match its expected type.")

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def matches(self, name: str) -> bool:
        return name in (self.longf, self.shortf)


@dataclass
class Handler:
    """Parses command-line chunks against a set of parameters."""

    chunks: list[str] = field(default_factory=list)
    params: list[Parameter] = field(default_factory=list)
    args: list[Argument] = field(default_factory=list)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Handler":
        """Build a handler from a full argv, skipping the program name."""
        return cls(chunks=list(argv[1:]))

    def add_parameter(self, param: Parameter) -> "Handler":
        self.params.append(param)
        return self

    # ------------------------------------------------------------------ lookup

    def _find_param(self, name: str) -> Optional[Parameter]:
        return next((p for p in self.params if p.matches(name)), None)

    def _find_arg(self, param: Parameter) -> Optional[Argument]:
        return next((a for a in self.args if param.matches(a.name)), None)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        param = self._find_param(name)
        if param is None:
            raise KeyError(f"no such parameter: {name}")
        return self._find_arg(param) is not None

    def get(self, name: str) -> ArgValue:
        """Return the value given for a flag, or None if it was not given."""
        param = self._find_param(name)
        if param is None:
            raise KeyError(f"no such parameter: {name}")
        arg = self._find_arg(param)
        return None if arg is None else arg.value

    # ------------------------------------------------------------------ messages

    def bad_chunk_message(self, msg: str, pos: int) -> str:
        """Render the chunks with a marker under the one at ``pos``."""
        if not 0 <= pos < len(self.chunks):
            raise IndexError("Out of bounds position")
        assembled = " ".join(self.chunks)
        offset = sum(len(chunk) + 1 for chunk in self.chunks[:pos])
        filler = list("~" * max(len(assembled), offset + 1))
        filler[offset] = "^"
        return "\n".join((assembled, "".join(filler), " " * offset + msg))

    def _bad_chunk(self, msg: str, pos: int) -> BadChunkError:
        return BadChunkError(msg, pos, self.bad_chunk_message(msg, pos))

    def help_text(self, msg: Optional[str] = None) -> str:
        """Return a table describing every parameter."""
        lines = []
        if msg is not None:
            lines.append(msg)
        lines.append(f"{'Flag Name':<30} {'Description':<65} {'Type':<8}")
        lines.append(f"{'=' * 30} {'=' * 65} {'=' * 8}")
        for param in self.params:
            kind = _KIND_NAMES.get(param.expected, "None")  # type: ignore[arg-type]
            flags = f"{param.longf} {param.shortf}"
            lines.append(f"{flags:<30} {param.description:<65} {kind:<8}")
        return "\n".join(lines)

    def display_help(self, msg: Optional[str] = None) -> None:
        print(self.help_text(msg), flush=True)

    # ------------------------------------------------------------------ parsing

    def _check_defaults(self) -> None:
        for param in self.params:
            if param.has_default and self._find_arg(param) is None:
                self.args.append(Argument(param.default, param.longf))  # type: ignore[arg-type]

    def _check_required(self) -> None:
        missing = [
            f'Flag "{p.longf} / {p.shortf}" is required. '
            "Please specify this flag alongside its value."
            for p in self.params
            if p.required and self._find_arg(p) is None
        ]
        if missing:
            raise RequiredArgumentError(missing)

    def _check_predicates(self) -> None:
        failures = []
        for param in self.params:
            arg = self._find_arg(param)
            if param.predicate is None or arg is None:
                continue
            result = param.predicate(arg.value)
            if result is not None:
                failures.append(
                    f'Error parsing command-line argument "{arg.name}": "{result}"'
                )
        if failures:
            raise PredicateError(failures)

    def _iter_values(self, chunk: str) -> Iterator[ArgValue]:
        as_bool = to_bool(chunk)
        if as_bool is not None:
            yield as_bool
            return
        as_int = to_i64(chunk)
        if as_int is not None:
            yield as_int
            return
        yield chunk

    def parse(self) -> "Handler":
        """Match chunks to parameters, then apply defaults and checks."""
        curr_flag: Optional[str] = None

        for i, chunk in enumerate(self.chunks):
            stripped = chunk.lstrip("-")
            hyphens = len(chunk) - len(stripped)
            if stripped and hyphens in (1, 2):
                param = self._find_param(chunk)
                if param is None:
                    raise self._bad_chunk(f'"{chunk}" is not a valid argument.', i)
                if self._find_arg(param) is not None:
                    raise self._bad_chunk("Duplicate argument, this was already passed.", i)
                if curr_flag is not None:
                    self.args.append(Argument(None, curr_flag, i))
                curr_flag = chunk
                continue

            if curr_flag is None:
                raise self._bad_chunk("Argument value was passed without providing a flag.", i)

            value = next(self._iter_values(chunk))
            self.args.append(Argument(value, curr_flag, i - 1))

            param = self._find_param(curr_flag)
            if param is None or param.expected is not _kind_of(value):
                raise self._bad_chunk(
                    f'argument for flag "{curr_flag}" does not match the expected type.', i
                )
            curr_flag = None

        if curr_flag is not None:
            self.args.append(Argument(None, curr_flag, len(self.chunks) - 1))

        self._check_defaults()
        self._check_required()
        self._check_predicates()
        return self