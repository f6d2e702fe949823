"""Layout helpers used while building structure and enum declarations."""

from __future__ import annotations

from .database import TypeDatabase
from .types import ArrayType, ElaboratedType, StructureType, TypeId


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of a power-of-two ``alignment``."""
    return (value + alignment - 1) & ~(alignment - 1)


def anonymous_member_offset(structure: StructureType, alignment: int) -> int:
    """Return the bit offset for an anonymous record appended to ``structure``.

    ``alignment`` is the byte alignment of the anonymous record. Unions and
    empty structures place the member at offset zero; otherwise it follows
    the last field, rounded up to the alignment.
    """
    if structure.is_union or not structure.fields:
        return 0

    last = structure.fields[-1]
    previous_end = (last.bit_offset + (last.bit_size + 7)) // 8
    return align_up(previous_end, alignment) * 8


def resolve_underlying(db: TypeDatabase, type_id: TypeId) -> TypeId:
    """Follow elaborated and array types down to the type they wrap."""
    while True:
        data = db.lookup_type(type_id)
        if isinstance(data, ElaboratedType):
            type_id = data.type
        elif isinstance(data, ArrayType):
            type_id = data.element_type
        else:
            return type_id


def should_replace_declaration(previous_is_forward: bool, is_forward: bool) -> bool:
    """Whether a new declaration supersedes an earlier one of the same type.

    Only a full definition replaces a previous forward declaration.
    """
    return previous_is_forward and not is_forward