"""A type database for C and C++ declarations, with header and x64dbg JSON output."""

__version__ = "0.1.0"

__all__ = ["database", "errors", "export", "header", "layout", "spelling", "types", "x64dbg"]