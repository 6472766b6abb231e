"""Type descriptions used by the checker and code generator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Optional, Union

from takc.text import panic
from takc.tokens import TokenType

INVALID_SYMBOL_INDEX = 0


class PrimitiveType(IntEnum):
    """Built-in scalar types."""

    NONE = 0
    U8 = 1
    I8 = 2
    U16 = 3
    I16 = 4
    U32 = 5
    I32 = 6
    U64 = 7
    I64 = 8
    F32 = 9
    F64 = 10
    BOOLEAN = 11
    VOID = 12


class TypeKind(IntEnum):
    """What sort of entity a type describes."""

    NONE = 0
    PRIMITIVE = 1
    PROCEDURE = 2
    STRUCT = 3


class TypeFlag(IntFlag):
    """Qualifiers and properties attached to a type."""

    NONE = 0
    CONSTANT = 1
    POINTER = 1 << 1
    ARRAY = 1 << 2
    PROCARG = 1 << 3
    DEFAULT_INIT = 1 << 4
    INFERRED = 1 << 5
    NON_CONCRETE = 1 << 6
    RVALUE = 1 << 7
    PROC_VARARGS = 1 << 8


_FLOATS = frozenset({PrimitiveType.F32, PrimitiveType.F64})
_INTEGRALS = frozenset(
    {
        PrimitiveType.I8,
        PrimitiveType.U8,
        PrimitiveType.I16,
        PrimitiveType.U16,
        PrimitiveType.I32,
        PrimitiveType.U32,
        PrimitiveType.I64,
        PrimitiveType.U64,
    }
)
_SIGNED = frozenset(
    {
        PrimitiveType.I8,
        PrimitiveType.I16,
        PrimitiveType.I32,
        PrimitiveType.I64,
        PrimitiveType.F32,
        PrimitiveType.F64,
    }
)

_PRIMITIVE_NAMES = {
    PrimitiveType.NONE: "None",
    PrimitiveType.U8: "u8",
    PrimitiveType.I8: "i8",
    PrimitiveType.U16: "u16",
    PrimitiveType.I16: "i16",
    PrimitiveType.U32: "u32",
    PrimitiveType.I32: "i32",
    PrimitiveType.U64: "u64",
    PrimitiveType.I64: "i64",
    PrimitiveType.F32: "f32",
    PrimitiveType.F64: "f64",
    PrimitiveType.BOOLEAN: "bool",
    PrimitiveType.VOID: "void",
}

_PRIMITIVE_SIZES = {
    PrimitiveType.BOOLEAN: 1,
    PrimitiveType.U8: 1,
    PrimitiveType.I8: 1,
    PrimitiveType.U16: 2,
    PrimitiveType.I16: 2,
    PrimitiveType.U32: 4,
    PrimitiveType.I32: 4,
    PrimitiveType.U64: 8,
    PrimitiveType.I64: 8,
    PrimitiveType.F32: 4,
    PrimitiveType.F64: 8,
}

_TOKEN_PRIMITIVES = {
    TokenType.KW_I8: PrimitiveType.I8,
    TokenType.KW_U8: PrimitiveType.U8,
    TokenType.KW_I16: PrimitiveType.I16,
    TokenType.KW_U16: PrimitiveType.U16,
    TokenType.KW_I32: PrimitiveType.I32,
    TokenType.KW_U32: PrimitiveType.U32,
    TokenType.KW_I64: PrimitiveType.I64,
    TokenType.KW_U64: PrimitiveType.U64,
    TokenType.KW_F32: PrimitiveType.F32,
    TokenType.KW_F64: PrimitiveType.F64,
    TokenType.KW_BOOL: PrimitiveType.BOOLEAN,
}


def _as_primitive(value: object) -> Optional[PrimitiveType]:
    if isinstance(value, PrimitiveType):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return PrimitiveType(value)
        except ValueError:
            return None
    return None


def is_float_primitive(primitive: int) -> bool:
    return _as_primitive(primitive) in _FLOATS


def is_integral_primitive(primitive: int) -> bool:
    return _as_primitive(primitive) in _INTEGRALS


def is_signed_primitive(primitive: int) -> bool:
    return _as_primitive(primitive) in _SIGNED


def primitive_to_string(primitive: int) -> str:
    """Return the source spelling of a primitive type."""
    prim = _as_primitive(primitive)
    if prim is None:
        panic("primitive_to_string: default case reached.")
    return _PRIMITIVE_NAMES[prim]


def primitive_size_bytes(primitive: int) -> int:
    """Return the size in bytes of a non-pointer primitive."""
    prim = _as_primitive(primitive)
    if prim not in _PRIMITIVE_SIZES:
        panic("primitive_size_bytes: non size-convertible primitive passed as argument.")
    return _PRIMITIVE_SIZES[prim]


def token_to_primitive(token_type: int) -> PrimitiveType:
    """Map a type keyword token to its primitive, or NONE."""
    try:
        tt = TokenType(token_type)
    except ValueError:
        return PrimitiveType.NONE
    return _TOKEN_PRIMITIVES.get(tt, PrimitiveType.NONE)


TypeName = Union[PrimitiveType, str, None]


@dataclass
class TypeData:
    """A full type: primitive, struct or procedure, with its qualifiers.

    ``name`` is a PrimitiveType, a struct name, or None for procedures.
    """

    sym_ref: int = INVALID_SYMBOL_INDEX
    kind: TypeKind = TypeKind.NONE
    pointer_depth: int = 0
    flags: TypeFlag = TypeFlag.NONE
    array_lengths: list[int] = field(default_factory=list)
    parameters: Optional[list["TypeData"]] = None
    return_type: Optional["TypeData"] = None
    name: TypeName = PrimitiveType.NONE

    # ------------------------------------------------------------------ constants

    @classmethod
    def const_int32(cls) -> "TypeData":
        return cls(
            kind=TypeKind.PRIMITIVE,
            name=PrimitiveType.I32,
            flags=TypeFlag.CONSTANT | TypeFlag.RVALUE,
        )

    @classmethod
    def const_uint64(cls) -> "TypeData":
        return cls(
            kind=TypeKind.PRIMITIVE,
            name=PrimitiveType.U64,
            flags=TypeFlag.CONSTANT | TypeFlag.RVALUE,
        )

    @classmethod
    def const_double(cls) -> "TypeData":
        return cls(
            kind=TypeKind.PRIMITIVE,
            name=PrimitiveType.F64,
            flags=TypeFlag.CONSTANT | TypeFlag.RVALUE,
        )

    @classmethod
    def const_char(cls) -> "TypeData":
        return cls(
            kind=TypeKind.PRIMITIVE,
            name=PrimitiveType.I8,
            flags=TypeFlag.CONSTANT | TypeFlag.RVALUE,
        )

    @classmethod
    def const_bool(cls) -> "TypeData":
        return cls(
            kind=TypeKind.PRIMITIVE,
            name=PrimitiveType.BOOLEAN,
            flags=TypeFlag.CONSTANT | TypeFlag.RVALUE,
        )

    @classmethod
    def const_voidptr(cls) -> "TypeData":
        return cls(name=PrimitiveType.VOID, pointer_depth=1, flags=TypeFlag.POINTER)

    @classmethod
    def const_string(cls) -> "TypeData":
        return cls(name=PrimitiveType.I8, pointer_depth=1, flags=TypeFlag.POINTER)

    # ------------------------------------------------------------------ copies

    def _copy(self, flags: TypeFlag) -> "TypeData":
        return dataclasses.replace(
            self, flags=TypeFlag(flags), array_lengths=list(self.array_lengths)
        )

    def to_lvalue(self) -> "TypeData":
        """Return a copy without the rvalue flag."""
        return self._copy(self.flags & ~TypeFlag.RVALUE)

    def to_rvalue(self) -> "TypeData":
        """Return a copy with the rvalue flag set."""
        return self._copy(self.flags | TypeFlag.RVALUE)

    # ------------------------------------------------------------------ text

    def to_string(self, include_qualifiers: bool = True, include_postfixes: bool = True) -> str:
        """Render the type as it would be written in source."""
        parts: list[str] = []
        if include_qualifiers:
            if self.flags & TypeFlag.INFERRED:
                return "Invalid Type"
            if self.flags & TypeFlag.CONSTANT:
                parts.append("const ")
            if self.flags & TypeFlag.RVALUE:
                parts.append("rvalue ")

        prim = _as_primitive(self.name)
        is_struct = isinstance(self.name, str)
        is_proc = False
        if prim is not None:
            parts.append(primitive_to_string(prim))
        elif is_struct:
            parts.append(self.name)  # type: ignore[arg-type]
        else:
            is_proc = True
            parts.append("proc")

        if is_struct and self.parameters is not None:
            inner = ",".join(param.to_string() for param in self.parameters)
            parts.append(f"[{inner}]")

        if include_postfixes:
            if self.flags & TypeFlag.POINTER:
                parts.append("^" * self.pointer_depth)
            if self.flags & TypeFlag.ARRAY:
                parts.extend(f"[{n}]" if n else "[]" for n in self.array_lengths)

        if is_proc:
            args = [param.to_string() for param in self.parameters or ()]
            if self.flags & TypeFlag.PROC_VARARGS:
                args.append("...")
            ret = self.return_type.to_string() if self.return_type is not None else "void"
            parts.append(f"({','.join(args)}) -> {ret}")

        return "".join(parts)

    def format(self, num_tabs: int = 0) -> str:
        """Return a multi-line description of every field, indented by tabs."""
        tabs = "\t" * num_tabs

        flag_text = ""
        for bit, label in (
            (TypeFlag.CONSTANT, "CONSTANT | "),
            (TypeFlag.POINTER, "POINTER | "),
            (TypeFlag.ARRAY, "ARRAY | "),
            (TypeFlag.PROCARG, "PROCEDURE_ARGUMENT | "),
            (TypeFlag.NON_CONCRETE, "NON_CONCRETE | "),
            (TypeFlag.DEFAULT_INIT, "DEFAULT INITIALIZED | "),
            (TypeFlag.INFERRED, "INFERRED"),
            (TypeFlag.PROC_VARARGS, "VARIADIC_ARGUMENTS | "),
        ):
            if self.flags & bit:
                flag_text += label
        if len(flag_text) >= 2 and flag_text[-2] == "|":
            flag_text = flag_text[:-2]
        if not flag_text:
            flag_text = "None"

        kind_text = {
            TypeKind.PROCEDURE: "Procedure",
            TypeKind.PRIMITIVE: "Variable",
            TypeKind.STRUCT: "Struct",
        }.get(self.kind, "None")

        prim = _as_primitive(self.name)
        if prim is not None:
            name_text = primitive_to_string(prim)
        elif isinstance(self.name, str):
            name_text = f"{self.name} (User Defined Struct)"
        else:
            name_text = "Procedure"

        ret_text = self.return_type.to_string() if self.return_type is not None else "N/A"

        if self.parameters is not None:
            param_text = ", ".join(param.to_string() for param in self.parameters)
        else:
            param_text = "N/A"

        lengths = ",".join(str(n) for n in self.array_lengths) or "N/A"

        rows = (
            ("Symbol Type:   ", kind_text),
            ("Type Flags:    ", flag_text),
            ("Pointer Depth: ", self.pointer_depth),
            ("Matrix Depth:  ", len(self.array_lengths)),
            ("Array Lengths: ", lengths),
            ("Type Name:     ", name_text),
            ("Return Type:   ", ret_text),
            ("Parameters:    ", param_text),
        )
        return "\n".join(f"{tabs} - {label}{value}" for label, value in rows) + "\n"

    # ------------------------------------------------------------------ predicates

    def _plain_primitive(self) -> Optional[PrimitiveType]:
        if self.flags & (TypeFlag.POINTER | TypeFlag.ARRAY):
            return None
        return _as_primitive(self.name)

    def is_primitive(self) -> bool:
        prim = self._plain_primitive()
        return prim is not None and prim != PrimitiveType.VOID

    def is_floating_point(self) -> bool:
        return self._plain_primitive() in _FLOATS

    def is_signed_primitive(self) -> bool:
        return self._plain_primitive() in _SIGNED

    def is_boolean(self) -> bool:
        return self._plain_primitive() == PrimitiveType.BOOLEAN

    def is_unsigned_primitive(self) -> bool:
        prim = self._plain_primitive()
        return prim is not None and prim not in _SIGNED

    def is_struct_value_type(self) -> bool:
        return self.kind == TypeKind.STRUCT and not (
            self.flags & (TypeFlag.POINTER | TypeFlag.ARRAY)
        )

    def is_f64(self) -> bool:
        return self._plain_primitive() == PrimitiveType.F64

    def is_f32(self) -> bool:
        return self._plain_primitive() == PrimitiveType.F32

    def is_integer(self) -> bool:
        prim = self._plain_primitive()
        return prim is not None and prim not in (
            PrimitiveType.VOID,
            PrimitiveType.F32,
            PrimitiveType.F64,
        )

    def is_aggregate(self) -> bool:
        return bool(self.flags & TypeFlag.ARRAY) or (
            self.kind == TypeKind.STRUCT and not self.flags & TypeFlag.POINTER
        )

    def is_non_aggregate_pointer(self) -> bool:
        return bool(self.flags & TypeFlag.POINTER) and not self.flags & TypeFlag.ARRAY