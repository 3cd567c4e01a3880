"""
Domain errors for the book catalog.

Every failure the core can report is a subclass of BookError carrying an
ErrorKind. Callers (HTTP layer, scripts) map kinds to their own responses;
the domain never knows about status codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure surfaced by the use-case service."""

    MISSING_FIELD = "missing_field"
    """A required input is absent or zero-valued"""

    INVALID_ISBN = "invalid_isbn"
    """ISBN has the wrong shape or fails its checksum"""

    INVALID_YEAR = "invalid_year"
    """Publication year outside [1450, current year]"""

    NOT_FOUND = "not_found"
    """Lookup by identifier or ISBN found nothing"""

    CONFLICT = "conflict"
    """ISBN already belongs to another book"""


class BookError(Exception):
    """Base class for all book catalog domain errors."""

    kind: ErrorKind


class MissingFieldError(BookError, ValueError):
    kind = ErrorKind.MISSING_FIELD


class InvalidISBNError(BookError, ValueError):
    kind = ErrorKind.INVALID_ISBN


class InvalidYearError(BookError, ValueError):
    kind = ErrorKind.INVALID_YEAR


class BookNotFoundError(BookError, LookupError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(BookError):
    kind = ErrorKind.CONFLICT
