"""Render a type database as a C/C++ header."""

from __future__ import annotations

from .database import TypeDatabase
from .errors import CircularDependencyError, InvalidPointerSizeError, InvalidTypeError
from .types import (
    ArrayType,
    BasicType,
    ElaboratedType,
    EnumType,
    FunctionType,
    PointerType,
    QualifiedType,
    StructureType,
    TypedefType,
    TypeId,
)

ALIGN_DEFINE = "#define ALIGN(x) __attribute__((aligned(x)))\n"


class HeaderFormatter:
    """Prints the types of a database as C declarations."""

    def __init__(
        self, db: TypeDatabase, include_offsets: bool = False, tab_str: str = "\t"
    ) -> None:
        self.db = db
        self.include_offsets = include_offsets
        self.tab_str = tab_str

    def print_database(self) -> str:
        """Return the whole database as a header."""
        return (
            self._print_forwards()
            + self._print_enums()
            + self._print_typedefs()
            + ALIGN_DEFINE
            + self._print_structs()
        )

    def _print_forwards(self) -> str:
        lines = []
        for data in self.db.types.values():
            if isinstance(data, StructureType) and data.name:
                keyword = "union" if data.is_union else "struct"
                lines.append(f"{keyword} {data.name};\n")
        return "".join(lines)

    def _print_enums(self) -> str:
        return "".join(
            self.print_enum(data) + ";\n"
            for data in self.db.types.values()
            if isinstance(data, EnumType)
        )

    def _print_typedefs(self) -> str:
        out: list[str] = []
        printed: set[TypeId] = set()
        stack: set[TypeId] = set()

        def visit(type_id: TypeId) -> None:
            if type_id in printed:
                return
            if type_id in stack:
                raise CircularDependencyError(f"typedef {type_id} depends on itself")
            stack.add(type_id)

            data = self.db.lookup_type(type_id)
            if not isinstance(data, (StructureType, EnumType)):
                for dep in data.dependencies():
                    visit(dep)
            if isinstance(data, TypedefType):
                out.append(self.print_forward_alias(data) + ";\n")

            printed.add(type_id)
            stack.discard(type_id)

        for type_id in list(self.db.types):
            visit(type_id)
        return "".join(out)

    def _print_structs(self) -> str:
        out: list[str] = []
        printed: set[TypeId] = set()
        stack: set[TypeId] = set()

        def visit(type_id: TypeId) -> None:
            if type_id in printed:
                return
            if type_id in stack:
                raise CircularDependencyError(f"structure {type_id} depends on itself")
            stack.add(type_id)

            data = self.db.lookup_type(type_id)
            if not isinstance(data, PointerType):
                for dep in data.dependencies():
                    visit(dep)
                if isinstance(data, StructureType) and data.name:
                    out.append(self.print_structure(data) + ";\n")

            printed.add(type_id)
            stack.discard(type_id)

        for type_id in list(self.db.types):
            visit(type_id)
        return "".join(out)

    def _wrap_anonymous(self, type_id: TypeId, identifier: str, indent: int) -> str:
        body = self.print_type(type_id, indent)
        return body if not identifier else f"{body} {identifier}"

    def _identifier(self, type_id: TypeId, identifier: str = "", indent: int = 0) -> str:
        """Wrap ``identifier`` in the declarator syntax of the given type."""
        data = self.db.lookup_type(type_id)

        if isinstance(data, QualifiedType):
            identifier = self._identifier(data.underlying, "", indent) + identifier
            if data.is_const:
                identifier = "const " + identifier
            if data.is_volatile:
                identifier = "volatile " + identifier
            if data.is_restrict:
                identifier = "restrict " + identifier
            return identifier

        if isinstance(data, ElaboratedType):
            return self._identifier(data.type, "", indent) + identifier

        if isinstance(data, TypedefType):
            return f"{data.alias} {identifier}"

        if isinstance(data, BasicType):
            return f"{data.name} {identifier}"

        if isinstance(data, (StructureType, EnumType)):
            if not data.name:
                return self._wrap_anonymous(type_id, identifier, indent)
            return f"{data.name} {identifier}"

        if isinstance(data, FunctionType):
            args = ",".join(self._identifier(arg) for arg in data.args)
            return self._identifier(data.return_type, f"{identifier}({args})", indent)

        if isinstance(data, PointerType):
            pointee = self.db.lookup_type(data.element_type)
            ptr_name = ""
            if data.bit_size != self.db.bit_pointer_size:
                if data.bit_size == 32:
                    ptr_name = " __ptr32 "
                elif data.bit_size == 64:
                    ptr_name = " __ptr64 "
                else:
                    raise InvalidPointerSizeError("invalid pointer size detected")
            if isinstance(pointee, (FunctionType, ArrayType)):
                identifier = f"(*{ptr_name}{identifier})"
            else:
                identifier = f"*{ptr_name}{identifier}"
            return self._identifier(data.element_type, identifier, indent)

        if isinstance(data, ArrayType):
            suffix = f"[{data.length}]" if data.fixed_length else "[]"
            return self._identifier(data.element_type, identifier + suffix, indent)

        raise InvalidTypeError("invalid type for identifier printer found")

    def _indents(self, count: int) -> str:
        return self.tab_str * count

    def print_type(self, type_id: TypeId, indent: int = 0, ignore_anonymous: bool = False) -> str:
        """Print the definition of a structure, enum or typedef; other types give ''."""
        data = self.db.lookup_type(type_id)
        if isinstance(data, StructureType):
            if ignore_anonymous and not data.name:
                return ""
            return self.print_structure(data, indent)
        if isinstance(data, EnumType):
            if ignore_anonymous and not data.name:
                return ""
            return self.print_enum(data, indent)
        if isinstance(data, TypedefType):
            return self.print_forward_alias(data, indent)
        return ""

    def print_structure(self, structure: StructureType, indent: int = 0) -> str:
        """Print a structure body; forward declarations print as ''."""
        settings = structure.settings
        if settings.is_forward:
            return ""

        base = self._indents(indent)
        inner = self._indents(indent + 1)
        keyword = "union" if structure.is_union else "struct"

        out = f"{base}{keyword} ALIGN({settings.align // 8}) {structure.name} \n{base}{{\n"
        for member in structure.fields:
            identifier = self._identifier(member.type_id, member.name, indent + 1)

            if member.is_bit_field:
                out += f"{inner}{identifier} : {member.bit_size};\n"
                continue

            offset = member.bit_offset // 8
            if "\n" not in identifier:
                if self.include_offsets:
                    out += f"{inner}/*[{offset:#x}]*/ {identifier}\n"
                else:
                    out += f"{inner}{identifier};\n"
                continue

            if self.include_offsets:
                out += f"{inner}/*[{offset:#x}]*/\n"
            out += identifier + ";\n"

        return out.rstrip(" \t") + base + "}"

    def print_enum(self, enum: EnumType, indent: int = 0) -> str:
        """Print an enum with its underlying type and members."""
        base = self._indents(indent)
        inner = self._indents(indent + 1)
        underlying = self._identifier(enum.settings.underlying)

        out = f"{base}enum {enum.name} : {underlying} {{"
        for value, name in enum.members:
            out += f"\n{inner}{name} = {value},"
        return out.rstrip(" \t") + "\n" + base + "}"

    def print_forward_alias(self, alias: TypedefType, indent: int = 0) -> str:
        """Print a typedef declaration without the trailing semicolon."""
        identifier = self._identifier(alias.type, alias.alias, indent)
        return f"{self._indents(indent)}typedef {identifier}"