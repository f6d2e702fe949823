"""Render a type database as an x64dbg type-library JSON document."""

from __future__ import annotations

from typing import Any

from .database import TypeDatabase
from .errors import InvalidPointerSizeError, X64DbgUnknownTypeError
from .types import (
    ArrayType,
    BasicType,
    CallConv,
    ElaboratedType,
    EnumType,
    FunctionType,
    PointerType,
    QualifiedType,
    StructureType,
    TypedefType,
    TypeId,
)

_CALL_CONVENTIONS = {
    CallConv.CDECL: "cdecl",
    CallConv.STDCALL: "stdcall",
    CallConv.THISCALL: "thiscall",
    CallConv.FASTCALL: "fastcall",
}

_RAW_POINTER_TYPES = {32: "unsigned int", 64: "unsigned long long"}

Json = dict[str, Any]


class X64DbgFormatter:
    """Builds the ``enums``/``structUnions``/``types``/``functions`` document."""

    def __init__(self, db: TypeDatabase) -> None:
        self.db = db
        self._names: dict[TypeId, str] = {}
        self._elaborate_chain: dict[TypeId, TypeId] = {}
        self._anonymous_counter = 0

    def generate_json(self) -> Json:
        """Return the JSON document as plain Python data."""
        self._names = {}
        self._elaborate_chain = {}
        self._anonymous_counter = 0

        document: Json = {"enums": [], "structUnions": [], "types": [], "functions": []}
        ordered = self._sorted_types()

        for type_id in ordered:
            self._register_name(type_id)

        for type_id in ordered:
            data = self.db.lookup_type(type_id)
            if isinstance(data, PointerType):
                document["structUnions"].append(self._pointer_json(type_id, data))
            elif isinstance(data, ArrayType):
                document["structUnions"].append(self._array_json(type_id, data))
            elif isinstance(data, TypedefType):
                entry = {
                    "name": self._insert_name(type_id, data.alias),
                    "type": self._lookup_name(data.type)[0],
                }
                if entry["name"] != entry["type"]:
                    document["types"].append(entry)
            elif isinstance(data, FunctionType):
                document["functions"].append(self._function_json(type_id, data))
            elif isinstance(data, StructureType):
                document["structUnions"].append(self._structure_json(type_id, data))
            elif isinstance(data, EnumType):
                document["enums"].append(self._enum_json(type_id, data))

        return document

    def _sorted_types(self) -> list[TypeId]:
        """Order type ids so that every type follows its dependencies."""
        visited: set[TypeId] = set()
        ordered: list[TypeId] = []

        def visit(type_id: TypeId) -> None:
            if type_id in visited:
                return
            visited.add(type_id)
            for dep in dict.fromkeys(self.db.lookup_type(type_id).dependencies()):
                visit(dep)
            ordered.append(type_id)

        for type_id in list(self.db.types):
            visit(type_id)
        return ordered

    def _register_name(self, type_id: TypeId) -> None:
        data = self.db.lookup_type(type_id)
        if isinstance(data, QualifiedType):
            self._elaborate_chain[type_id] = data.underlying
        elif isinstance(data, ElaboratedType):
            self._elaborate_chain[type_id] = data.type
        elif isinstance(data, BasicType):
            self._insert_name(type_id, data.name)
        elif isinstance(data, (PointerType, FunctionType, ArrayType)):
            self._insert_name(type_id, "")
        elif isinstance(data, TypedefType):
            self._insert_name(type_id, data.alias)
        elif isinstance(data, (StructureType, EnumType)):
            self._insert_name(type_id, data.name)
        else:
            raise X64DbgUnknownTypeError("encountered invalid/null type")

    def _insert_name(self, type_id: TypeId, name: str) -> str:
        if type_id in self._names:
            return self._names[type_id]
        if not name:
            name = f"__anonymous_type{self._anonymous_counter}"
            self._anonymous_counter += 1
        self._names[type_id] = name
        return name

    def _follow_chain(self, type_id: TypeId) -> TypeId:
        while type_id in self._elaborate_chain:
            type_id = self._elaborate_chain[type_id]
        return type_id

    def _unfold_pointers(self, type_id: TypeId) -> tuple[int, TypeId]:
        depth = 0
        while True:
            type_id = self._follow_chain(type_id)
            data = self.db.lookup_type(type_id)
            if not isinstance(data, PointerType) or data.bit_size != self.db.bit_pointer_size:
                return depth, type_id
            type_id = data.element_type
            depth += 1

    def _lookup_name(self, type_id: TypeId) -> tuple[str, TypeId]:
        depth, underlying = self._unfold_pointers(type_id)
        underlying = self._follow_chain(underlying)
        if underlying not in self._names:
            raise X64DbgUnknownTypeError("type id must exist in the output type names")
        return self._names[underlying] + "*" * depth, underlying

    def _pointer_json(self, type_id: TypeId, data: PointerType) -> Json:
        member: Json = {"sizeBits": data.bit_size, "name": "ptr", "offset": 0}
        if data.bit_size != self.db.bit_pointer_size:
            try:
                member["type"] = _RAW_POINTER_TYPES[data.bit_size]
            except KeyError:
                raise InvalidPointerSizeError("invalid pointer size detected") from None
        else:
            member["type"] = self._lookup_name(data.element_type)[0] + "*"
        return {
            "name": self._insert_name(type_id, ""),
            "members": [member],
            "sizeBits": data.bit_size,
        }

    def _array_json(self, type_id: TypeId, data: ArrayType) -> Json:
        size = data.length * data.element_size
        member = {
            "sizeBits": size,
            "name": "arr",
            "offset": 0,
            "bitfield": False,
            "arrsize": data.length,
            "type": self._lookup_name(data.element_type)[0],
        }
        return {"name": self._insert_name(type_id, ""), "members": [member], "sizeBits": size}

    def _function_json(self, type_id: TypeId, data: FunctionType) -> Json:
        entry: Json = {
            "name": self._insert_name(type_id, ""),
            "rettype": self._lookup_name(data.return_type)[0],
            "args": [{"type": self._lookup_name(arg)[0], "name": ""} for arg in data.args],
        }
        if data.call_conv in _CALL_CONVENTIONS:
            entry["callconv"] = _CALL_CONVENTIONS[data.call_conv]
        return entry

    def _structure_json(self, type_id: TypeId, data: StructureType) -> Json:
        members = []
        for member in data.fields:
            type_name, underlying = self._lookup_name(member.type_id)
            entry: Json = {
                "name": type_name if not member.name and not member.is_bit_field else member.name,
                "sizeBits": member.bit_size,
                "bitOffset": member.bit_offset,
                "bitfield": member.is_bit_field,
            }
            underlying_data = self.db.lookup_type(underlying)
            if isinstance(underlying_data, ArrayType):
                entry["arrsize"] = underlying_data.length
                entry["type"] = self._lookup_name(underlying_data.element_type)[0]
            else:
                entry["type"] = type_name
            members.append(entry)

        return {
            "name": self._insert_name(type_id, data.name),
            "members": members,
            "sizeBits": data.settings.size,
            "isUnion": data.settings.is_union,
        }

    def _enum_json(self, type_id: TypeId, data: EnumType) -> Json:
        return {
            "name": self._insert_name(type_id, data.name),
            "members": [{"name": name, "value": value} for value, name in data.members],
            "sizeBits": data.settings.size,
            "isFlags": True,
        }