# manytypes

`manytypes` keeps a database of C and C++ types: structures, unions, enums,
typedefs, pointers, arrays, qualifiers, elaborated references and function
prototypes. It writes that database out in two forms:

- a C header with forward declarations, enums, typedefs and aligned
  structure bodies, and
- the JSON type database that the x64dbg debugger loads.

The package has no third-party dependencies.

## The type database

A `manytypes.database.TypeDatabase` is created for a target pointer size in
bytes: 4 for 32-bit targets and 8 for 64-bit targets. Its `bit_pointer_size`
holds that size in bits. It starts out holding 17 built-in basic types with ids
1 to 17, in this order: `bool`, `char`, `unsigned char`, `signed char`,
`wchar_t`, `short`, `unsigned short`, `int`, `unsigned int`, `long`,
`unsigned long`, `long long`, `unsigned long long`, `float`, `double`,
`long double`, `void`. Each type gets the next integer id when it is inserted.

```python
from manytypes.database import TypeDatabase
from manytypes.types import (
    Field,
    PointerType,
    StructureSettings,
    StructureType,
    TypedefType,
)

db = TypeDatabase(8)

point = StructureType(
    StructureSettings(name="point", align=32, size=64, is_union=False, is_forward=False),
    True,
)
point_id = db.insert_type(point, 0)

int_id = 8  # "int" is the eighth built-in type
point.add_field(Field(bit_offset=0, bit_size=32, is_bit_field=False, name="x", type_id=int_id))
point.add_field(Field(bit_offset=32, bit_size=32, is_bit_field=False, name="y", type_id=int_id))

ptr_id = db.insert_type(PointerType(point_id, 64), 0)
db.insert_type(TypedefType("point_ptr", ptr_id), 0)

print(db.type_print(ptr_id))  # point*
```

Other operations:

- `lookup_type`, `update_type` and `contains_type` read and replace entries
  by id; `db.types` is a read-only mapping of every entry in insertion order,
  and `id in db` tests membership.
- `insert_placeholder_type` reserves an id holding a `NullType`, for a type
  whose definition comes later.
- `insert_semantic_parent` records that one type is scoped inside another.
- `type_print` names pointers, typedefs, structures and enums; other kinds
  raise `TypeNotPrintableError`.

Looking up or updating an id that does not exist raises `TypeNotFoundError`.

The type models live in `manytypes.types`: `BasicType`, `QualifiedType`,
`ElaboratedType`, `TypedefType`, `PointerType`, `ArrayType`, `FunctionType`
(with a `CallConv`), `EnumType` (with `EnumSettings` and `insert_member`),
`StructureType` (with `StructureSettings`, `Field` and `add_field`) and
`NullType`. Each has a `dependencies()` method listing the ids it refers to.

## Writing a header

```python
from manytypes.export import create_header

print(create_header(db))
```

The header holds, in order: forward declarations of named structures and
unions, enums, typedefs (each after the types it depends on), an `ALIGN` macro
definition, and the named structure bodies after the structures they contain.
A typedef or structure chain that depends on itself raises
`CircularDependencyError`.

For finer control, `manytypes.header.HeaderFormatter(db, include_offsets=False,
tab_str="\t")` prints a single entry through `print_type`, `print_structure`,
`print_enum` and `print_forward_alias`. With `include_offsets=True` each
structure member is preceded by its byte offset in a comment.

## Writing an x64dbg type database

```python
from manytypes.export import create_x64dbg_database

with open("types.json", "w", encoding="utf-8") as out:
    out.write(create_x64dbg_database(db))
```

The JSON is indented by four spaces with keys sorted. It has four sections:
`enums`, `structUnions`, `types` and `functions`.

- Pointers and arrays are written as small wrapper structures with a single
  `ptr` or `arr` member.
- Anonymous types get generated names of the form `__anonymous_typeN`.
- A pointer whose size differs from the database's pointer size is written as
  a plain `unsigned int` or `unsigned long long`, because the debugger could
  not follow it; any other size raises `InvalidPointerSizeError`.
- A typedef whose name equals the name of its target is left out.

`manytypes.x64dbg.X64DbgFormatter(db).generate_json()` returns the same
document as a dictionary.

## Helpers

`manytypes.layout` holds the rules used when records are assembled:

- `align_up` rounds a value up to a power-of-two alignment.
- `anonymous_member_offset` gives the bit offset at which an anonymous union
  or structure member is appended to a structure.
- `resolve_underlying` follows elaborated and array types down to the type
  they name.
- `should_replace_declaration` is true only when a full definition follows a
  forward declaration.

`manytypes.spelling.parse_elaborated_spelling` splits a spelling such as
`struct ns::inner::name` into `("struct", "ns::inner", "name")`, and returns
`None` for spellings that are not of that form.

## Errors

All errors derive from `manytypes.errors.ManyTypesError`. They are grouped
under `DatabaseError`, `FormatterError` (with `ClangFormatterError` and
`X64DbgFormatterError` beneath it), `ParserError` and `ClangError`.

## What it does not do

The package does not read C or C++ source files. There is no parser and no
command-line tool: a database is built by inserting types through the API
shown above. The `ParserError` and `ClangError` families are defined for code
that builds databases from parsed declarations, but nothing in the package
raises them. Nothing here talks to a running debugger; loading the JSON is
left to the user.