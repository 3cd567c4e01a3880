"""
Domain layer - Core business logic and entities.

This layer contains the Book entity, its validators and value objects, and
defines the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book
from .errors import (
    BookError,
    BookNotFoundError,
    ConflictError,
    ErrorKind,
    InvalidISBNError,
    InvalidYearError,
    MissingFieldError,
)
from .value_objects import UpdateInput, SearchFilter, ImportSummary

__all__ = [
    # Entities
    "Book",
    # Value Objects
    "UpdateInput",
    "SearchFilter",
    "ImportSummary",
    # Errors
    "ErrorKind",
    "BookError",
    "MissingFieldError",
    "InvalidISBNError",
    "InvalidYearError",
    "BookNotFoundError",
    "ConflictError",
]
