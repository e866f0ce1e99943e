"""Exceptions raised by fdfgen before any encoding or I/O happens."""


class FDFError(Exception):
    """Base class for fdfgen errors."""


class InvalidInputError(FDFError, TypeError):
    """Raised when the field data is missing or is not a mapping."""

    def __init__(self, message: str = "Data must be a non-null object") -> None:
        super().__init__(message)


class InvalidPathError(FDFError, TypeError):
    """Raised when the output path is missing, empty, or not text."""

    def __init__(self, message: str = "fileName must be a non-empty string") -> None:
        super().__init__(message)
