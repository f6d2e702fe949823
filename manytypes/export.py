"""Top-level entry points that render a type database."""

from __future__ import annotations

import json

from .database import TypeDatabase
from .header import HeaderFormatter
from .x64dbg import X64DbgFormatter


def create_header(db: TypeDatabase) -> str:
    """Return every type in ``db`` as a C/C++ header."""
    return HeaderFormatter(db).print_database()


def create_x64dbg_database(db: TypeDatabase) -> str:
    """Return ``db`` as an x64dbg type-library JSON document.

    The document is indented by four spaces with object keys in sorted order.
    """
    document = X64DbgFormatter(db).generate_json()
    return json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False)