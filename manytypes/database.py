"""Registry of all known types, keyed by integer id."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import (
    InvalidSemanticParentError,
    TypeAlreadyExistsError,
    TypeNotFoundError,
    TypeNotPrintableError,
)
from .types import (
    BasicType,
    EnumType,
    NullType,
    PointerType,
    StructureType,
    TypeData,
    TypedefType,
    TypeId,
)

# Builtin types of the Windows (MSVC) data model; ids 1..17 in this order.
BASIC_TYPES: tuple[tuple[str, int], ...] = (
    ("bool", 8),
    ("char", 8),
    ("unsigned char", 8),
    ("signed char", 8),
    ("wchar_t", 16),
    ("short", 16),
    ("unsigned short", 16),
    ("int", 32),
    ("unsigned int", 32),
    ("long", 32),
    ("unsigned long", 32),
    ("long long", 64),
    ("unsigned long long", 64),
    ("float", 32),
    ("double", 64),
    ("long double", 64),
    ("void", 0),
)


class TypeDatabase:
    """Stores type definitions and their optional semantic parents."""

    def __init__(self, byte_pointer_size: int) -> None:
        self.bit_pointer_size = byte_pointer_size * 8
        self._types: dict[TypeId, TypeData] = {}
        self._scopes: dict[TypeId, TypeId] = {}
        self._next_id: TypeId = 1
        for name, size in BASIC_TYPES:
            self.insert_type(BasicType(name, size))

    @property
    def types(self) -> Mapping[TypeId, TypeData]:
        """Read-only view of every type by id, in insertion order."""
        return MappingProxyType(self._types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def insert_type(self, data: TypeData, semantic_parent: TypeId = 0) -> TypeId:
        if semantic_parent and semantic_parent not in self._scopes:
            raise InvalidSemanticParentError("semantic parent must be valid type")

        type_id = self._next_id
        self._types[type_id] = data
        if semantic_parent:
            self._scopes[type_id] = semantic_parent
        self._next_id += 1
        return type_id

    def insert_placeholder_type(
        self, data: NullType | None = None, semantic_parent: TypeId = 0
    ) -> TypeId:
        return self.insert_type(data if data is not None else NullType(), semantic_parent)

    def insert_semantic_parent(self, type_id: TypeId, parent: TypeId) -> None:
        if type_id not in self._types:
            raise TypeNotFoundError("type must exist")
        if parent not in self._types:
            raise TypeNotFoundError("parent type must exist")
        if type_id in self._scopes:
            raise TypeAlreadyExistsError("type must not exist in scope")
        self._scopes[type_id] = parent

    def update_type(self, type_id: TypeId, data: TypeData) -> None:
        if type_id not in self._types:
            raise TypeNotFoundError("type with current id must exist")
        self._types[type_id] = data

    def lookup_type(self, type_id: TypeId) -> TypeData:
        try:
            return self._types[type_id]
        except KeyError:
            raise TypeNotFoundError("type info must contain id") from None

    def contains_type(self, type_id: TypeId) -> bool:
        return type_id in self._types

    def type_print(self, type_id: TypeId) -> str:
        """Return the printable name of a pointer, typedef, structure or enum."""
        data = self.lookup_type(type_id)
        if isinstance(data, PointerType):
            return self.type_print(data.element_type) + "*"
        if isinstance(data, TypedefType):
            return data.alias
        if isinstance(data, (StructureType, EnumType)):
            return data.name
        raise TypeNotPrintableError(f"unknown type name printed {type_id}")