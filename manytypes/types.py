"""Type models stored in the type database."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

TypeId = int


@dataclass
class NullType:
    """Placeholder for a type that is referenced before it is defined."""

    def dependencies(self) -> list[TypeId]:
        return []


@dataclass
class QualifiedType:
    """A const/volatile/restrict qualified view of another type."""

    underlying: TypeId
    is_const: bool = False
    is_volatile: bool = False
    is_restrict: bool = False

    def dependencies(self) -> list[TypeId]:
        return [self.underlying]


@dataclass
class BasicType:
    """A builtin type with a name and a size in bits."""

    name: str
    size: int

    def dependencies(self) -> list[TypeId]:
        return []


@dataclass
class ArrayType:
    """An array of elements; an incomplete array has length zero."""

    element_type: TypeId
    length: int
    element_size: int
    fixed_length: bool = True

    def dependencies(self) -> list[TypeId]:
        return [self.element_type]


@dataclass
class PointerType:
    """A pointer of a given bit width to another type."""

    element_type: TypeId
    bit_size: int

    def dependencies(self) -> list[TypeId]:
        return [self.element_type]


@dataclass
class TypedefType:
    """A named alias for another type."""

    alias: str
    type: TypeId

    def dependencies(self) -> list[TypeId]:
        return [self.type]


@dataclass
class ElaboratedType:
    """A spelled reference such as ``struct ns::name`` forwarding to a type."""

    type: TypeId
    sugar: str = ""
    scope: str = ""
    type_name: str = ""

    def dependencies(self) -> list[TypeId]:
        return [self.type]

    def is_clear(self) -> bool:
        return not self.sugar and not self.scope


class CallConv(enum.Enum):
    UNKNOWN = "unk"
    CDECL = "cdecl"
    STDCALL = "stdcall"
    THISCALL = "thiscall"
    FASTCALL = "fastcall"


@dataclass
class FunctionType:
    """A function prototype."""

    call_conv: CallConv
    return_type: TypeId
    args: list[TypeId] = field(default_factory=list)

    def dependencies(self) -> list[TypeId]:
        return [*self.args, self.return_type]


@dataclass
class EnumSettings:
    name: str
    underlying: TypeId
    size: int
    is_forward: bool = False


@dataclass
class EnumType:
    """An enumeration with ordered (value, name) members."""

    settings: EnumSettings
    members: list[tuple[int, str]] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.settings.name

    def insert_member(self, value: int, name: str) -> None:
        self.members.append((value, name))

    def dependencies(self) -> list[TypeId]:
        return [self.settings.underlying]


@dataclass
class Field:
    """A structure member, located by bit offset and bit size."""

    bit_offset: int
    bit_size: int
    is_bit_field: bool
    name: str
    type_id: TypeId


@dataclass
class StructureSettings:
    name: str
    align: int
    size: int
    is_union: bool = False
    is_forward: bool = False


@dataclass
class StructureType:
    """A struct, class or union with its fields in declaration order."""

    settings: StructureSettings
    in_order_insertion: bool = True
    fields: list[Field] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def is_union(self) -> bool:
        return self.settings.is_union

    def add_field(self, field: Field) -> None:
        self.fields.append(field)

    def dependencies(self) -> list[TypeId]:
        return list(dict.fromkeys(f.type_id for f in self.fields))


TypeData = Union[
    StructureType,
    EnumType,
    TypedefType,
    ElaboratedType,
    QualifiedType,
    FunctionType,
    ArrayType,
    PointerType,
    BasicType,
    NullType,
]