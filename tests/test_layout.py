import pytest

from manytypes.database import TypeDatabase
from manytypes.errors import TypeNotFoundError
from manytypes.layout import (
    align_up,
    anonymous_member_offset,
    resolve_underlying,
    should_replace_declaration,
)
from manytypes.types import (
    ArrayType,
    ElaboratedType,
    Field,
    PointerType,
    StructureSettings,
    StructureType,
)

INT_ID = 8  # "int" is the eighth builtin type


def _struct(is_union=False, fields=()):
    s = StructureType(StructureSettings(name="s", align=32, size=64, is_union=is_union))
    for f in fields:
        s.add_field(f)
    return s


@pytest.mark.parametrize("value", [0, 1, 3, 4, 5, 17, 100])
@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16])
def test_align_up_invariants(value, alignment):
    result = align_up(value, alignment)
    assert result % alignment == 0
    assert value <= result < value + alignment


def test_align_up_keeps_aligned_values():
    assert align_up(16, 8) == 16
    assert align_up(0, 4) == 0


def test_align_up_rounds_up():
    assert align_up(5, 4) == 8


def test_anonymous_offset_in_union_is_zero():
    s = _struct(is_union=True, fields=[Field(0, 32, False, "a", INT_ID)])
    assert anonymous_member_offset(s, 8) == 0


def test_anonymous_offset_in_empty_struct_is_zero():
    assert anonymous_member_offset(_struct(), 4) == 0


def test_anonymous_offset_follows_last_field():
    s = _struct(fields=[Field(0, 32, False, "a", INT_ID)])
    assert anonymous_member_offset(s, 4) == 32


@pytest.mark.parametrize("alignment", [1, 2, 4, 8])
@pytest.mark.parametrize("offset,size", [(0, 8), (8, 16), (32, 3), (40, 64)])
def test_anonymous_offset_invariants(alignment, offset, size):
    s = _struct(fields=[Field(offset, size, False, "x", INT_ID)])
    result = anonymous_member_offset(s, alignment)
    assert result % (alignment * 8) == 0
    assert result >= offset + size


def test_resolve_underlying_through_elaborated_and_array():
    db = TypeDatabase(8)
    arr = db.insert_type(ArrayType(INT_ID, 4, 32))
    elab = db.insert_type(ElaboratedType(arr))
    assert resolve_underlying(db, elab) == INT_ID
    assert resolve_underlying(db, arr) == INT_ID


def test_resolve_underlying_stops_at_pointer():
    db = TypeDatabase(8)
    ptr = db.insert_type(PointerType(INT_ID, 64))
    elab = db.insert_type(ElaboratedType(ptr))
    assert resolve_underlying(db, elab) == ptr


def test_resolve_underlying_of_basic_is_itself():
    db = TypeDatabase(4)
    assert resolve_underlying(db, INT_ID) == INT_ID


def test_resolve_underlying_missing_type_raises():
    db = TypeDatabase(8)
    with pytest.raises(TypeNotFoundError):
        resolve_underlying(db, 9999)


def test_resolve_underlying_dangling_reference_raises():
    db = TypeDatabase(8)
    elab = db.insert_type(ElaboratedType(9999))
    with pytest.raises(TypeNotFoundError):
        resolve_underlying(db, elab)


@pytest.mark.parametrize(
    "previous_is_forward,is_forward,expected",
    [
        (True, False, True),
        (True, True, False),
        (False, False, False),
        (False, True, False),
    ],
)
def test_should_replace_declaration(previous_is_forward, is_forward, expected):
    assert should_replace_declaration(previous_is_forward, is_forward) is expected