"""Exception hierarchy raised by the type database, parser and formatters."""


class ManyTypesError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClangError(ManyTypesError):
    """Raised when the C/C++ front end reports a failure."""

    def __init__(self, message: str) -> None:
        super().__init__("ClangException: " + message)


class TuError(ClangError):
    """Raised when a translation unit cannot be created."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"TuException 0x{code:x}")


class DiagError(ClangError):
    """Raised when parsing produced error diagnostics."""

    def __init__(self, message: str) -> None:
        super().__init__("DiagException\n" + message)


class DatabaseError(ManyTypesError):
    """Raised on invalid operations against the type database."""

    def __init__(self, message: str) -> None:
        super().__init__("DatabaseException: " + message)


class InvalidSemanticParentError(DatabaseError):
    def __init__(self, message: str) -> None:
        super().__init__("InvalidSemanticParentException: " + message)


class TypeNotFoundError(DatabaseError):
    def __init__(self, message: str) -> None:
        super().__init__("TypeNotFoundException: " + message)


class TypeAlreadyExistsError(DatabaseError):
    def __init__(self, message: str) -> None:
        super().__init__("TypeAlreadyExistsException: " + message)


class TypeNotPrintableError(DatabaseError):
    def __init__(self, message: str) -> None:
        super().__init__("TypeNotPrintable: " + message)


class FormatterError(ManyTypesError):
    """Raised when a type database cannot be rendered."""

    def __init__(self, message: str) -> None:
        super().__init__("FormatterException: " + message)


class CircularDependencyError(FormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("CircularDependencyException: " + message)


class ClangFormatterError(FormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("ClangFormatterException: " + message)


class UnknownTypeError(ClangFormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("UnknownTypeException: " + message)


class InvalidTypeError(ClangFormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("InvalidTypeException: " + message)


class X64DbgFormatterError(FormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("X64DbgFormatterException: " + message)


class InvalidPointerSizeError(X64DbgFormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("InvalidPointerSizeException: " + message)


class X64DbgUnknownTypeError(X64DbgFormatterError):
    def __init__(self, message: str) -> None:
        super().__init__("X64DbgUnknownTypeException: " + message)


class ParserError(ManyTypesError):
    """Raised when declarations cannot be turned into database types."""

    def __init__(self, message: str) -> None:
        super().__init__("ParserException: " + message)


class TypeNotDefinedError(ParserError):
    def __init__(self, message: str) -> None:
        super().__init__("TypeNotDefinedException: " + message)


class _LocatedParserError(ParserError):
    _label = ""

    def __init__(self, message: str, debug_line: str) -> None:
        self.debug_line = debug_line
        super().__init__(f"{self._label}: {message} : {debug_line}")


class InvalidStructureError(_LocatedParserError):
    _label = "InvalidStructureException"


class InvalidParentDeclarationError(_LocatedParserError):
    _label = "InvalidParentDeclarationException"


class InvalidFieldError(_LocatedParserError):
    _label = "InvalidFieldException"


class UnsupportedScopeError(_LocatedParserError):
    _label = "UnsupportedScopeException"