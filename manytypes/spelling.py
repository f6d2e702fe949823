"""Decompose elaborated type spellings such as ``struct ns::name``."""

from __future__ import annotations

import re
from typing import Optional

_ELABORATED = re.compile(
    r"^\s*(?:(struct|class|union|enum)\s+)?((?:\w+::)+)?(\w+)\s*$",
    re.ASCII,
)


def parse_elaborated_spelling(spelling: str) -> Optional[tuple[str, str, str]]:
    """Split a spelling into (keyword, scope, type name).

    The keyword and scope are empty strings when absent; the scope has its
    trailing ``::`` removed. Returns None when the spelling does not have the
    form ``[keyword] [scope::]name``.
    """
    match = _ELABORATED.fullmatch(spelling)
    if match is None:
        return None

    keyword = match.group(1) or ""
    scope = match.group(2) or ""
    type_name = match.group(3)
    if scope.endswith("::"):
        scope = scope[:-2]
    return keyword, scope, type_name