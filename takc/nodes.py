"""Syntax tree node types and the classifications the compiler applies to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional, Union

from takc.tokens import TokenType
from takc.typedata import TypeData


class NodeType(IntEnum):
    """The kind of a syntax tree node."""

    NONE = 0
    VARDECL = 1
    PROCDECL = 2
    BINEXPR = 3
    UNARYEXPR = 4
    IDENT = 5
    BRANCH = 6
    IF = 7
    ELSE = 8
    FOR = 9
    SWITCH = 10
    CASE = 11
    DEFAULT = 12
    WHILE = 13
    DOWHILE = 14
    BLOCK = 15
    CALL = 16
    BRK = 17
    CONT = 18
    RET = 19
    DEFER = 20
    DEFER_IF = 21
    SIZEOF = 22
    SINGLETON_LITERAL = 23
    BRACED_EXPRESSION = 24
    STRUCT_DEFINITION = 25
    ENUM_DEFINITION = 26
    SUBSCRIPT = 27
    NAMESPACEDECL = 28
    CAST = 29
    TYPE_ALIAS = 30
    MEMBER_ACCESS = 31
    INCLUDE_STMT = 32


_NO_EVALUATION = frozenset(
    {
        NodeType.STRUCT_DEFINITION,
        NodeType.ENUM_DEFINITION,
        NodeType.INCLUDE_STMT,
        NodeType.TYPE_ALIAS,
    }
)

_NO_GENERATION = frozenset(
    {
        NodeType.TYPE_ALIAS,
        NodeType.INCLUDE_STMT,
        NodeType.STRUCT_DEFINITION,
    }
)

_SUBEXPRESSIONS = frozenset(
    {
        NodeType.CALL,
        NodeType.IDENT,
        NodeType.BINEXPR,
        NodeType.SINGLETON_LITERAL,
        NodeType.UNARYEXPR,
        NodeType.BRACED_EXPRESSION,
        NodeType.CAST,
        NodeType.SUBSCRIPT,
        NodeType.MEMBER_ACCESS,
        NodeType.SIZEOF,
    }
)

_TOPLEVEL = frozenset(
    {
        NodeType.VARDECL,
        NodeType.STRUCT_DEFINITION,
        NodeType.NAMESPACEDECL,
        NodeType.PROCDECL,
        NodeType.INCLUDE_STMT,
        NodeType.ENUM_DEFINITION,
        NodeType.SINGLETON_LITERAL,
        NodeType.TYPE_ALIAS,
    }
)

_NO_TERMINAL = frozenset(
    {
        NodeType.PROCDECL,
        NodeType.BRANCH,
        NodeType.IF,
        NodeType.ELSE,
        NodeType.FOR,
        NodeType.WHILE,
        NodeType.SWITCH,
        NodeType.NAMESPACEDECL,
        NodeType.BLOCK,
        NodeType.STRUCT_DEFINITION,
        NodeType.ENUM_DEFINITION,
    }
)


def needs_evaluating(node_type: int) -> bool:
    """True if the checker must evaluate a top-level node of this type."""
    return node_type not in _NO_EVALUATION


def needs_generating(node_type: int) -> bool:
    """True if code must be generated for a top-level node of this type."""
    return node_type not in _NO_GENERATION


def valid_subexpression(node_type: int) -> bool:
    """True if a node of this type may appear inside an expression."""
    return node_type in _SUBEXPRESSIONS


def valid_at_toplevel(node_type: int) -> bool:
    """True if a node of this type may appear at file scope."""
    return node_type in _TOPLEVEL


def never_needs_terminal(node_type: int) -> bool:
    """True if a statement of this type is not followed by a semicolon."""
    return node_type in _NO_TERMINAL


@dataclass(eq=False)
class AstNode:
    """Base of every syntax tree node: where it came from and who owns it."""

    node_type: ClassVar[NodeType] = NodeType.NONE

    src_pos: int = 0
    line: int = 1
    file: str = ""
    parent: Optional["AstNode"] = field(default=None, repr=False)

    @property
    def type(self) -> NodeType:
        return self.node_type


@dataclass(eq=False)
class AstSingletonLiteral(AstNode):
    node_type: ClassVar[NodeType] = NodeType.SINGLETON_LITERAL

    value: str = ""
    literal_type: TokenType = TokenType.NONE


@dataclass(eq=False)
class AstBracedExpression(AstNode):
    node_type: ClassVar[NodeType] = NodeType.BRACED_EXPRESSION

    members: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstBinexpr(AstNode):
    node_type: ClassVar[NodeType] = NodeType.BINEXPR

    operator: TokenType = TokenType.NONE
    left_op: Optional[AstNode] = None
    right_op: Optional[AstNode] = None


@dataclass(eq=False)
class AstIf(AstNode):
    node_type: ClassVar[NodeType] = NodeType.IF

    body: list[AstNode] = field(default_factory=list)
    condition: Optional[AstNode] = None


@dataclass(eq=False)
class AstElse(AstNode):
    node_type: ClassVar[NodeType] = NodeType.ELSE

    body: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstBranch(AstNode):
    """Consecutive if / else statements; ``else_`` may be absent."""

    node_type: ClassVar[NodeType] = NodeType.BRANCH

    if_: Optional[AstIf] = None
    else_: Optional[AstElse] = None


@dataclass(eq=False)
class AstCase(AstNode):
    node_type: ClassVar[NodeType] = NodeType.CASE

    value: Optional[AstSingletonLiteral] = None
    fallthrough: bool = False
    body: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstDefault(AstNode):
    """The default case of a switch."""

    node_type: ClassVar[NodeType] = NodeType.DEFAULT

    body: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstSwitch(AstNode):
    node_type: ClassVar[NodeType] = NodeType.SWITCH

    target: Optional[AstNode] = None
    default: Optional[AstDefault] = None
    cases: list[AstCase] = field(default_factory=list)


@dataclass(eq=False)
class AstIdentifier(AstNode):
    node_type: ClassVar[NodeType] = NodeType.IDENT

    symbol_index: int = 0


@dataclass(eq=False)
class AstMemberAccess(AstNode):
    node_type: ClassVar[NodeType] = NodeType.MEMBER_ACCESS

    target: Optional[AstNode] = None
    path: str = ""


@dataclass(eq=False)
class AstVardecl(AstNode):
    node_type: ClassVar[NodeType] = NodeType.VARDECL

    identifier: Optional[AstIdentifier] = None
    init_value: Optional[AstNode] = None


@dataclass(eq=False)
class AstProcdecl(AstNode):
    node_type: ClassVar[NodeType] = NodeType.PROCDECL

    identifier: Optional[AstIdentifier] = None
    parameters: list[AstVardecl] = field(default_factory=list)
    children: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstStructdef(AstNode):
    node_type: ClassVar[NodeType] = NodeType.STRUCT_DEFINITION

    name: str = ""


@dataclass(eq=False)
class AstCall(AstNode):
    """A call; ``arguments`` is empty for a procedure that takes none."""

    node_type: ClassVar[NodeType] = NodeType.CALL

    target: Optional[AstNode] = None
    arguments: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstFor(AstNode):
    node_type: ClassVar[NodeType] = NodeType.FOR

    body: list[AstNode] = field(default_factory=list)
    init: Optional[AstNode] = None
    condition: Optional[AstNode] = None
    update: Optional[AstNode] = None


@dataclass(eq=False)
class AstUnaryexpr(AstNode):
    node_type: ClassVar[NodeType] = NodeType.UNARYEXPR

    operator: TokenType = TokenType.NONE
    operand: Optional[AstNode] = None


@dataclass(eq=False)
class AstWhile(AstNode):
    node_type: ClassVar[NodeType] = NodeType.WHILE

    condition: Optional[AstNode] = None
    body: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstBlock(AstNode):
    node_type: ClassVar[NodeType] = NodeType.BLOCK

    children: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstDefer(AstNode):
    """A deferred call; ``call`` is expected to be an AstCall."""

    node_type: ClassVar[NodeType] = NodeType.DEFER

    call: Optional[AstNode] = None


@dataclass(eq=False)
class AstDeferIf(AstNode):
    """A deferred call made only when ``condition`` holds."""

    node_type: ClassVar[NodeType] = NodeType.DEFER_IF

    call: Optional[AstNode] = None
    condition: Optional[AstNode] = None


@dataclass(eq=False)
class AstSizeof(AstNode):
    """``sizeof`` applied either to a type or to an expression."""

    node_type: ClassVar[NodeType] = NodeType.SIZEOF

    target: Union[TypeData, AstNode, None] = None


@dataclass(eq=False)
class AstDoWhile(AstNode):
    node_type: ClassVar[NodeType] = NodeType.DOWHILE

    condition: Optional[AstNode] = None
    body: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstSubscript(AstNode):
    """``operand[value]``."""

    node_type: ClassVar[NodeType] = NodeType.SUBSCRIPT

    operand: Optional[AstNode] = None
    value: Optional[AstNode] = None


@dataclass(eq=False)
class AstNamespaceDecl(AstNode):
    node_type: ClassVar[NodeType] = NodeType.NAMESPACEDECL

    full_path: str = ""
    children: list[AstNode] = field(default_factory=list)


@dataclass(eq=False)
class AstCast(AstNode):
    node_type: ClassVar[NodeType] = NodeType.CAST

    target: Optional[AstNode] = None
    cast_type: TypeData = field(default_factory=TypeData)


@dataclass(eq=False)
class AstRet(AstNode):
    node_type: ClassVar[NodeType] = NodeType.RET

    value: Optional[AstNode] = None


@dataclass(eq=False)
class AstTypeAlias(AstNode):
    node_type: ClassVar[NodeType] = NodeType.TYPE_ALIAS

    name: str = ""


@dataclass(eq=False)
class AstIncludeStmt(AstNode):
    node_type: ClassVar[NodeType] = NodeType.INCLUDE_STMT

    name: str = ""


@dataclass(eq=False)
class AstEnumdef(AstNode):
    node_type: ClassVar[NodeType] = NodeType.ENUM_DEFINITION

    namespace: Optional[AstNamespaceDecl] = None
    alias: Optional[AstTypeAlias] = None


@dataclass(eq=False)
class AstCont(AstNode):
    node_type: ClassVar[NodeType] = NodeType.CONT


@dataclass(eq=False)
class AstBrk(AstNode):
    node_type: ClassVar[NodeType] = NodeType.BRK