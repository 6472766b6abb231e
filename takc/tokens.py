"""Token types, token kinds and the helpers that classify them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Optional, Union

from takc.text import actual_char, panic


class TokenType(IntEnum):
    """Every token the lexer can produce, numbered from zero in order."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return count

    NONE = auto()
    END_OF_FILE = auto()
    ILLEGAL = auto()
    IDENTIFIER = auto()
    VALUE_ASSIGNMENT = auto()
    TYPE_ASSIGNMENT = auto()
    CONST_TYPE_ASSIGNMENT = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LSQUARE_BRACKET = auto()
    RSQUARE_BRACKET = auto()
    COMMA = auto()
    DOLLAR_SIGN = auto()
    DOT = auto()
    THREE_DOTS = auto()
    QUESTION_MARK = auto()
    POUND = auto()
    AT = auto()
    COMP_EQUALS = auto()
    COMP_NOT_EQUALS = auto()
    COMP_LT = auto()
    COMP_LTE = auto()
    COMP_GT = auto()
    COMP_GTE = auto()
    NAMESPACE_ACCESS = auto()
    CONDITIONAL_AND = auto()
    CONDITIONAL_OR = auto()
    CONDITIONAL_NOT = auto()
    INTEGER_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHARACTER_LITERAL = auto()
    BOOLEAN_LITERAL = auto()
    HEX_LITERAL = auto()
    PLUS = auto()
    PLUSEQ = auto()
    SUB = auto()
    SUBEQ = auto()
    MUL = auto()
    MULEQ = auto()
    DIV = auto()
    DIVEQ = auto()
    MOD = auto()
    MODEQ = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    BITWISE_AND = auto()
    BITWISE_ANDEQ = auto()
    BITWISE_NOT = auto()
    BITWISE_OR = auto()
    BITWISE_OREQ = auto()
    BITWISE_XOR_OR_PTR = auto()
    BITWISE_XOREQ = auto()
    BITWISE_LSHIFT = auto()
    BITWISE_LSHIFTEQ = auto()
    BITWISE_RSHIFT = auto()
    BITWISE_RSHIFTEQ = auto()
    KW_RET = auto()
    KW_BRK = auto()
    KW_CONT = auto()
    KW_FOR = auto()
    KW_WHILE = auto()
    KW_DO = auto()
    KW_IF = auto()
    KW_ELSE = auto()
    KW_STRUCT = auto()
    KW_ENUM = auto()
    KW_SWITCH = auto()
    KW_CASE = auto()
    KW_DEFAULT = auto()
    KW_FALLTHROUGH = auto()
    KW_NAMESPACE = auto()
    KW_DEFER = auto()
    KW_DEFER_IF = auto()
    KW_PROC = auto()
    KW_BLK = auto()
    KW_CAST = auto()
    KW_SIZEOF = auto()
    KW_F32 = auto()
    KW_F64 = auto()
    KW_BOOL = auto()
    KW_U8 = auto()
    KW_I8 = auto()
    KW_U16 = auto()
    KW_I16 = auto()
    KW_U32 = auto()
    KW_I32 = auto()
    KW_U64 = auto()
    KW_I64 = auto()
    KW_VOID = auto()
    KW_NULLPTR = auto()
    ARROW = auto()

    @property
    def symbol(self) -> str:
        """The source text this token stands for, or "" if it varies."""
        return _SYMBOLS[self]


_SYMBOLS: dict[TokenType, str] = {
    TokenType.NONE: "",
    TokenType.END_OF_FILE: "\\0",
    TokenType.ILLEGAL: "",
    TokenType.IDENTIFIER: "",
    TokenType.VALUE_ASSIGNMENT: "=",
    TokenType.TYPE_ASSIGNMENT: ":",
    TokenType.CONST_TYPE_ASSIGNMENT: "::",
    TokenType.SEMICOLON: ";",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.LSQUARE_BRACKET: "[",
    TokenType.RSQUARE_BRACKET: "]",
    TokenType.COMMA: ",",
    TokenType.DOLLAR_SIGN: "$",
    TokenType.DOT: ".",
    TokenType.THREE_DOTS: "...",
    TokenType.QUESTION_MARK: "?",
    TokenType.POUND: "#",
    TokenType.AT: "@",
    TokenType.COMP_EQUALS: "==",
    TokenType.COMP_NOT_EQUALS: "!=",
    TokenType.COMP_LT: "<",
    TokenType.COMP_LTE: "<=",
    TokenType.COMP_GT: ">",
    TokenType.COMP_GTE: ">=",
    TokenType.NAMESPACE_ACCESS: "\\",
    TokenType.CONDITIONAL_AND: "&&",
    TokenType.CONDITIONAL_OR: "||",
    TokenType.CONDITIONAL_NOT: "!",
    TokenType.INTEGER_LITERAL: "",
    TokenType.FLOAT_LITERAL: "",
    TokenType.STRING_LITERAL: "",
    TokenType.CHARACTER_LITERAL: "",
    TokenType.BOOLEAN_LITERAL: "",
    TokenType.HEX_LITERAL: "",
    TokenType.PLUS: "+",
    TokenType.PLUSEQ: "+=",
    TokenType.SUB: "-",
    TokenType.SUBEQ: "-=",
    TokenType.MUL: "*",
    TokenType.MULEQ: "*=",
    TokenType.DIV: "/",
    TokenType.DIVEQ: "/=",
    TokenType.MOD: "%",
    TokenType.MODEQ: "%=",
    TokenType.INCREMENT: "++",
    TokenType.DECREMENT: "--",
    TokenType.BITWISE_AND: "&",
    TokenType.BITWISE_ANDEQ: "&=",
    TokenType.BITWISE_NOT: "~",
    TokenType.BITWISE_OR: "|",
    TokenType.BITWISE_OREQ: "|=",
    TokenType.BITWISE_XOR_OR_PTR: "^",
    TokenType.BITWISE_XOREQ: "^=",
    TokenType.BITWISE_LSHIFT: "<<",
    TokenType.BITWISE_LSHIFTEQ: "<<=",
    TokenType.BITWISE_RSHIFT: ">>",
    TokenType.BITWISE_RSHIFTEQ: ">>=",
    TokenType.KW_RET: "ret",
    TokenType.KW_BRK: "brk",
    TokenType.KW_CONT: "cont",
    TokenType.KW_FOR: "for",
    TokenType.KW_WHILE: "while",
    TokenType.KW_DO: "do",
    TokenType.KW_IF: "if",
    TokenType.KW_ELSE: "else",
    TokenType.KW_STRUCT: "struct",
    TokenType.KW_ENUM: "enum",
    TokenType.KW_SWITCH: "switch",
    TokenType.KW_CASE: "case",
    TokenType.KW_DEFAULT: "default",
    TokenType.KW_FALLTHROUGH: "fallthrough",
    TokenType.KW_NAMESPACE: "namespace",
    TokenType.KW_DEFER: "defer",
    TokenType.KW_DEFER_IF: "defer_if",
    TokenType.KW_PROC: "proc",
    TokenType.KW_BLK: "block",
    TokenType.KW_CAST: "cast",
    TokenType.KW_SIZEOF: "sizeof",
    TokenType.KW_F32: "f32",
    TokenType.KW_F64: "f64",
    TokenType.KW_BOOL: "bool",
    TokenType.KW_U8: "u8",
    TokenType.KW_I8: "i8",
    TokenType.KW_U16: "u16",
    TokenType.KW_I16: "i16",
    TokenType.KW_U32: "u32",
    TokenType.KW_I32: "i32",
    TokenType.KW_U64: "u64",
    TokenType.KW_I64: "i64",
    TokenType.KW_VOID: "void",
    TokenType.KW_NULLPTR: "nullptr",
    TokenType.ARROW: "->",
}


class TokenKind(IntEnum):
    """Broad category of a token."""

    UNSPECIFIC = 0
    PUNCTUATOR = 1
    BINARY_EXPR_OPERATOR = 2
    UNARY_EXPR_OPERATOR = 3
    LITERAL = 4
    KEYWORD = 5
    TYPE_IDENTIFIER = 6


@dataclass(eq=False)
class Token:
    """A single lexed token. Tokens compare equal by their type alone."""

    type: TokenType = TokenType.NONE
    kind: TokenKind = TokenKind.UNSPECIFIC
    src_pos: int = 0
    value: str = ""
    line: int = 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return other.type == self.type
        if isinstance(other, int):
            return int(other) == int(self.type)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def dump(self) -> None:
        """Print a description of this token to standard output."""
        print(
            f"Value: {self.value}\n"
            f"Type: {token_symbol(self.type)}\n"
            f"Kind: {kind_name(self.kind)}\n"
            f"File Pos Index: {self.src_pos}\n"
            f"Line Number: {self.line}\n",
            flush=True,
        )


def _as_token_type(value: int) -> Optional[TokenType]:
    try:
        return TokenType(value)
    except ValueError:
        return None


def token_symbol(token_type: int) -> str:
    """Return the source text of a token type, or "Unknown." if it is not one."""
    tt = _as_token_type(token_type)
    return "Unknown." if tt is None else tt.symbol


def token_type_name(token_type: int) -> str:
    """Return the name of a token type, or "Unknown." if it is not one."""
    tt = _as_token_type(token_type)
    return "Unknown." if tt is None else tt.name


def kind_name(kind: int) -> str:
    """Return the name of a token kind, or "Unknown" if it is not one."""
    try:
        return TokenKind(kind).name
    except ValueError:
        return "Unknown"


_PRECEDENCE: dict[TokenType, int] = {
    TokenType.VALUE_ASSIGNMENT: 12,
    TokenType.PLUSEQ: 12,
    TokenType.SUBEQ: 12,
    TokenType.MULEQ: 12,
    TokenType.DIVEQ: 12,
    TokenType.MODEQ: 12,
    TokenType.BITWISE_LSHIFTEQ: 12,
    TokenType.BITWISE_RSHIFTEQ: 12,
    TokenType.BITWISE_ANDEQ: 12,
    TokenType.BITWISE_OREQ: 12,
    TokenType.BITWISE_XOREQ: 12,
    TokenType.CONDITIONAL_AND: 11,
    TokenType.CONDITIONAL_OR: 10,
    TokenType.MUL: 8,
    TokenType.DIV: 8,
    TokenType.MOD: 8,
    TokenType.PLUS: 7,
    TokenType.SUB: 7,
    TokenType.BITWISE_LSHIFT: 6,
    TokenType.BITWISE_RSHIFT: 6,
    TokenType.COMP_GTE: 5,
    TokenType.COMP_GT: 5,
    TokenType.COMP_LTE: 5,
    TokenType.COMP_LT: 5,
    TokenType.COMP_EQUALS: 4,
    TokenType.COMP_NOT_EQUALS: 4,
    TokenType.BITWISE_AND: 3,
    TokenType.BITWISE_XOR_OR_PTR: 2,
    TokenType.BITWISE_OR: 1,
}


def precedence_of(operator: int) -> int:
    """Return the binding precedence of a binary operator."""
    tt = _as_token_type(operator)
    if tt is None or tt not in _PRECEDENCE:
        panic("precedence_of: default case reached")
    return _PRECEDENCE[tt]


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_SIZE_MASK = (1 << 64) - 1


def literal_to_int(token: Token) -> Optional[int]:
    """Return the unsigned 64-bit value of an integer or character literal token."""
    if token.type == TokenType.INTEGER_LITERAL:
        match = _LEADING_INT.match(token.value)
        if match is None:
            return None
        value = int(match.group(1))
        if not _I64_MIN <= value <= _I64_MAX:
            return None
        return value & _SIZE_MASK
    if token.type == TokenType.CHARACTER_LITERAL:
        ch = actual_char(token.value)
        if ch is None:
            return None
        return ord(ch)
    return None


TokenLike = Union[Token, int]


def _type_of(token: TokenLike) -> int:
    return token.type if isinstance(token, Token) else token


_UNARY_EXTRA = frozenset(
    {TokenType.PLUS, TokenType.SUB, TokenType.BITWISE_XOR_OR_PTR, TokenType.BITWISE_AND}
)
_ARITH_ASSIGN = frozenset(
    {
        TokenType.PLUSEQ,
        TokenType.SUBEQ,
        TokenType.MULEQ,
        TokenType.DIVEQ,
        TokenType.MODEQ,
        TokenType.INCREMENT,
        TokenType.DECREMENT,
    }
)
_IDENT_START = frozenset({TokenType.IDENTIFIER, TokenType.NAMESPACE_ACCESS})
_PTR_ARITH = frozenset(
    {
        TokenType.PLUS,
        TokenType.PLUSEQ,
        TokenType.SUB,
        TokenType.SUBEQ,
        TokenType.INCREMENT,
        TokenType.DECREMENT,
    }
)
_ARITHMETIC = frozenset(
    {
        TokenType.PLUS,
        TokenType.PLUSEQ,
        TokenType.SUB,
        TokenType.SUBEQ,
        TokenType.MUL,
        TokenType.MULEQ,
        TokenType.DIV,
        TokenType.DIVEQ,
        TokenType.MOD,
        TokenType.MODEQ,
        TokenType.INCREMENT,
        TokenType.DECREMENT,
    }
)
_BW_ASSIGN = frozenset(
    {
        TokenType.BITWISE_ANDEQ,
        TokenType.BITWISE_OREQ,
        TokenType.BITWISE_XOREQ,
        TokenType.BITWISE_LSHIFTEQ,
        TokenType.BITWISE_RSHIFTEQ,
    }
)
_BITWISE = frozenset(
    {
        TokenType.BITWISE_AND,
        TokenType.BITWISE_ANDEQ,
        TokenType.BITWISE_OR,
        TokenType.BITWISE_NOT,
        TokenType.BITWISE_OREQ,
        TokenType.BITWISE_XOR_OR_PTR,
        TokenType.BITWISE_XOREQ,
        TokenType.BITWISE_LSHIFT,
        TokenType.BITWISE_LSHIFTEQ,
        TokenType.BITWISE_RSHIFT,
        TokenType.BITWISE_RSHIFTEQ,
    }
)
_COMPARISON = frozenset(
    {
        TokenType.COMP_EQUALS,
        TokenType.COMP_NOT_EQUALS,
        TokenType.COMP_LT,
        TokenType.COMP_LTE,
        TokenType.COMP_GT,
        TokenType.COMP_GTE,
    }
)
_LOGICAL = _COMPARISON | frozenset(
    {TokenType.CONDITIONAL_AND, TokenType.CONDITIONAL_OR, TokenType.CONDITIONAL_NOT}
)


def is_valid_unary_operator(token: Token) -> bool:
    """True if the token may start a unary expression."""
    return token.kind == TokenKind.UNARY_EXPR_OPERATOR or token.type in _UNARY_EXTRA


def is_arith_assign(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _ARITH_ASSIGN


def is_ident_start(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _IDENT_START


def is_valid_ptr_arith(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _PTR_ARITH


def is_arithmetic(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _ARITHMETIC


def is_bitwise_assign(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _BW_ASSIGN


def is_bitwise(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _BITWISE


def is_comparison(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _COMPARISON


def is_logical(token_type: TokenLike) -> bool:
    return _type_of(token_type) in _LOGICAL