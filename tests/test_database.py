import pytest

from manytypes.database import BASIC_TYPES, TypeDatabase
from manytypes.errors import (
    InvalidSemanticParentError,
    TypeAlreadyExistsError,
    TypeNotFoundError,
    TypeNotPrintableError,
)
from manytypes.types import (
    BasicType,
    EnumSettings,
    EnumType,
    NullType,
    PointerType,
    StructureSettings,
    StructureType,
    TypedefType,
)


@pytest.fixture
def db():
    return TypeDatabase(8)


def test_pointer_size_in_bits():
    assert TypeDatabase(8).bit_pointer_size == 64
    assert TypeDatabase(4).bit_pointer_size == 32


def test_basic_types_occupy_first_ids(db):
    assert len(db.types) == len(BASIC_TYPES)
    assert db.lookup_type(1) == BasicType("bool", 8)
    assert db.lookup_type(len(BASIC_TYPES)) == BasicType("void", 0)
    names = [t.name for t in db.types.values()]
    assert names == [name for name, _ in BASIC_TYPES]


def test_insert_returns_next_id(db):
    first = db.insert_type(TypedefType("A", 1))
    second = db.insert_type(TypedefType("B", 1))
    assert first == len(BASIC_TYPES) + 1
    assert second == first + 1
    assert db.contains_type(second)
    assert second in db


def test_placeholder_is_null_type(db):
    tid = db.insert_placeholder_type()
    assert db.lookup_type(tid) == NullType()


def test_lookup_missing_raises(db):
    with pytest.raises(TypeNotFoundError):
        db.lookup_type(9999)
    assert db.contains_type(9999) is False


def test_update_replaces_data(db):
    tid = db.insert_placeholder_type()
    st = StructureType(StructureSettings("S", 32, 32))
    db.update_type(tid, st)
    assert db.lookup_type(tid) is st


def test_update_missing_raises(db):
    with pytest.raises(TypeNotFoundError):
        db.update_type(9999, NullType())


def test_lookup_returns_shared_object(db):
    tid = db.insert_type(EnumType(EnumSettings("E", 8, 32)))
    db.lookup_type(tid).insert_member(1, "ONE")
    assert db.lookup_type(tid).members == [(1, "ONE")]


def test_semantic_parent_must_be_scoped(db):
    with pytest.raises(InvalidSemanticParentError):
        db.insert_type(NullType(), semantic_parent=1)


def test_semantic_parent_registration(db):
    child = db.insert_placeholder_type()
    db.insert_semantic_parent(child, 1)
    nested = db.insert_type(NullType(), semantic_parent=child)
    assert db.contains_type(nested)
    with pytest.raises(TypeAlreadyExistsError):
        db.insert_semantic_parent(child, 2)


def test_semantic_parent_missing_types(db):
    with pytest.raises(TypeNotFoundError):
        db.insert_semantic_parent(9999, 1)
    with pytest.raises(TypeNotFoundError):
        db.insert_semantic_parent(1, 9999)


def test_type_print_names(db):
    st = db.insert_type(StructureType(StructureSettings("Foo", 32, 32)))
    ptr = db.insert_type(PointerType(st, 64))
    ptr2 = db.insert_type(PointerType(ptr, 64))
    alias = db.insert_type(TypedefType("PFOO", ptr))
    en = db.insert_type(EnumType(EnumSettings("Mode", 8, 32)))
    assert db.type_print(ptr2) == "Foo**"
    assert db.type_print(alias) == "PFOO"
    assert db.type_print(en) == "Mode"


def test_type_print_basic_not_printable(db):
    with pytest.raises(TypeNotPrintableError):
        db.type_print(8)
    ptr = db.insert_type(PointerType(8, 64))
    with pytest.raises(TypeNotPrintableError):
        db.type_print(ptr)


def test_type_print_missing_raises(db):
    with pytest.raises(TypeNotFoundError):
        db.type_print(9999)