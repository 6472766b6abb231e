import pytest

from takc.text import InternalError
from takc.tokens import TokenType
from takc.typedata import (
    PrimitiveType,
    TypeData,
    TypeFlag,
    TypeKind,
    is_float_primitive,
    is_integral_primitive,
    is_signed_primitive,
    primitive_size_bytes,
    primitive_to_string,
    token_to_primitive,
)


def prim(p, flags=TypeFlag.NONE, **kw):
    return TypeData(kind=TypeKind.PRIMITIVE, name=p, flags=flags, **kw)


@pytest.mark.parametrize(
    "p, text",
    [
        (PrimitiveType.NONE, "None"),
        (PrimitiveType.U8, "u8"),
        (PrimitiveType.I8, "i8"),
        (PrimitiveType.U16, "u16"),
        (PrimitiveType.I16, "i16"),
        (PrimitiveType.U32, "u32"),
        (PrimitiveType.I32, "i32"),
        (PrimitiveType.U64, "u64"),
        (PrimitiveType.I64, "i64"),
        (PrimitiveType.F32, "f32"),
        (PrimitiveType.F64, "f64"),
        (PrimitiveType.BOOLEAN, "bool"),
        (PrimitiveType.VOID, "void"),
    ],
)
def test_primitive_to_string(p, text):
    assert primitive_to_string(p) == text


def test_primitive_to_string_invalid_panics():
    with pytest.raises(InternalError):
        primitive_to_string(999)


@pytest.mark.parametrize(
    "p, size",
    [
        (PrimitiveType.BOOLEAN, 1),
        (PrimitiveType.U8, 1),
        (PrimitiveType.I16, 2),
        (PrimitiveType.U32, 4),
        (PrimitiveType.F32, 4),
        (PrimitiveType.I64, 8),
        (PrimitiveType.F64, 8),
    ],
)
def test_primitive_size_bytes(p, size):
    assert primitive_size_bytes(p) == size


@pytest.mark.parametrize("p", [PrimitiveType.VOID, PrimitiveType.NONE])
def test_primitive_size_bytes_rejects_unsized(p):
    with pytest.raises(InternalError):
        primitive_size_bytes(p)


def test_token_to_primitive():
    assert token_to_primitive(TokenType.KW_I8) is PrimitiveType.I8
    assert token_to_primitive(TokenType.KW_BOOL) is PrimitiveType.BOOLEAN
    assert token_to_primitive(TokenType.KW_F64) is PrimitiveType.F64
    assert token_to_primitive(TokenType.KW_VOID) is PrimitiveType.NONE
    assert token_to_primitive(TokenType.IDENTIFIER) is PrimitiveType.NONE


def test_primitive_classification():
    assert is_float_primitive(PrimitiveType.F32)
    assert not is_float_primitive(PrimitiveType.I32)
    assert is_integral_primitive(PrimitiveType.U64)
    assert not is_integral_primitive(PrimitiveType.BOOLEAN)
    assert is_signed_primitive(PrimitiveType.F64)
    assert not is_signed_primitive(PrimitiveType.U8)


def test_const_constructors():
    t = TypeData.const_int32()
    assert t.kind is TypeKind.PRIMITIVE
    assert t.flags == TypeFlag.CONSTANT | TypeFlag.RVALUE
    assert t.to_string(include_qualifiers=False) == "i32"
    assert t.to_string().startswith("const ")
    assert TypeData.const_bool().is_boolean()
    assert TypeData.const_double().is_f64()
    assert TypeData.const_uint64().name is PrimitiveType.U64
    assert TypeData.const_char().name is PrimitiveType.I8


def test_const_pointers():
    vp = TypeData.const_voidptr()
    s = TypeData.const_string()
    assert vp.is_non_aggregate_pointer()
    assert s.is_non_aggregate_pointer()
    assert vp.kind is TypeKind.NONE
    assert not vp.flags & TypeFlag.CONSTANT
    assert s.to_string().startswith("i8")
    assert s.to_string().count("^") == 1


def test_lvalue_rvalue_round_trip():
    base = prim(PrimitiveType.I32, array_lengths=[2])
    r = base.to_rvalue()
    assert r.flags & TypeFlag.RVALUE
    assert not base.flags & TypeFlag.RVALUE
    assert r.to_lvalue() == base
    r.array_lengths.append(5)
    assert base.array_lengths == [2]


def test_to_string_inferred():
    assert prim(PrimitiveType.I32, TypeFlag.INFERRED).to_string() == "Invalid Type"
    assert prim(PrimitiveType.I32, TypeFlag.INFERRED).to_string(False) == "i32"


def test_to_string_pointer():
    t = prim(PrimitiveType.U8, TypeFlag.POINTER, pointer_depth=3)
    assert t.to_string().count("^") == 3
    assert t.to_string(include_postfixes=False) == "u8"


def test_to_string_array():
    t = prim(PrimitiveType.I32, TypeFlag.ARRAY, array_lengths=[3, 0])
    assert t.to_string() == "i32[3][]"


def test_to_string_procedure():
    proc = TypeData(
        kind=TypeKind.PROCEDURE,
        name=None,
        parameters=[prim(PrimitiveType.I32), prim(PrimitiveType.BOOLEAN)],
    )
    assert proc.to_string() == "proc(i32,bool) -> void"
    varargs = TypeData(
        kind=TypeKind.PROCEDURE,
        name=None,
        flags=TypeFlag.PROC_VARARGS,
        parameters=[prim(PrimitiveType.I32)],
        return_type=prim(PrimitiveType.U64),
    )
    text = varargs.to_string()
    assert "..." in text
    assert text.endswith("u64")


def test_to_string_generic_struct():
    t = TypeData(kind=TypeKind.STRUCT, name="Vec", parameters=[prim(PrimitiveType.I32)])
    assert t.to_string(False, False) == "Vec[i32]"


def test_format_layout():
    t = prim(PrimitiveType.I32)
    lines = t.format(2).splitlines()
    assert len(lines) == 8
    assert all(line.startswith("\t\t - ") for line in lines)
    text = t.format()
    assert "Variable" in text
    assert "N/A" in text
    assert "None" in text


def test_format_values():
    t = TypeData(
        kind=TypeKind.STRUCT,
        name="Point",
        flags=TypeFlag.CONSTANT,
        parameters=[],
        return_type=prim(PrimitiveType.F32),
    )
    text = t.format()
    assert "Struct" in text
    assert "Point (User Defined Struct)" in text
    assert "CONSTANT" in text
    assert "|" not in text
    assert "f32" in text


@pytest.mark.parametrize(
    "t, expected",
    [
        (prim(PrimitiveType.I32), True),
        (prim(PrimitiveType.VOID), False),
        (prim(PrimitiveType.I32, TypeFlag.POINTER, pointer_depth=1), False),
        (prim(PrimitiveType.I32, TypeFlag.ARRAY, array_lengths=[1]), False),
        (TypeData(kind=TypeKind.STRUCT, name="S"), False),
    ],
)
def test_is_primitive(t, expected):
    assert t.is_primitive() is expected


def test_numeric_predicates():
    f = prim(PrimitiveType.F32)
    assert f.is_floating_point() and f.is_f32() and not f.is_f64()
    assert f.is_signed_primitive() and not f.is_unsigned_primitive()
    assert not f.is_integer()
    u = prim(PrimitiveType.U16)
    assert u.is_integer() and u.is_unsigned_primitive()
    assert not u.is_boolean()


def test_struct_and_aggregate_predicates():
    s = TypeData(kind=TypeKind.STRUCT, name="S")
    sp = TypeData(kind=TypeKind.STRUCT, name="S", flags=TypeFlag.POINTER, pointer_depth=1)
    arr = prim(PrimitiveType.I8, TypeFlag.ARRAY | TypeFlag.POINTER, array_lengths=[4])
    assert s.is_struct_value_type() and s.is_aggregate()
    assert not sp.is_struct_value_type() and not sp.is_aggregate()
    assert sp.is_non_aggregate_pointer()
    assert arr.is_aggregate()
    assert not arr.is_non_aggregate_pointer()