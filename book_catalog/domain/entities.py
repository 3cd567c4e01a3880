"""
Domain entities for the book catalog.

Entities are objects with a unique identity that runs through time and
different representations. They are the core building blocks of the domain.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .errors import MissingFieldError
from .utils.clock import Clock, SystemClock, utc_now
from .validators import normalize_isbn, validate_isbn, validate_year
from .value_objects import UpdateInput

_default_clock = SystemClock()


@dataclass
class Book:
    """
    Represents a book in the catalog.

    This is the central entity of the domain. Construction does NOT validate:
    call validate_basic() explicitly before handing a book to storage, so
    callers can assemble partial state (e.g. apply a patch) first.

    Note: the timestamp defaults read the system UTC clock, not an injected
    Clock. Use create_new(..., clock=...) when time must be controlled.
    """

    title: str
    """Book title (trimmed, required)"""

    author: str
    """Author name (trimmed, required)"""

    year: int
    """Publication year, 1450 to current UTC year"""

    genre: str = ""
    """Free-text genre (trimmed, may be empty)"""

    isbn: str = ""
    """Normalized ISBN-10 or ISBN-13, unique across the catalog"""

    id: int = 0
    """Identifier assigned by storage; 0 means not yet persisted"""

    created_at: datetime = field(default_factory=utc_now)
    """When this book was added to the catalog (UTC)"""

    updated_at: datetime = field(default_factory=utc_now)
    """When this book was last mutated (UTC)"""

    def is_persisted(self) -> bool:
        """Check if storage has assigned an identifier."""
        return self.id != 0

    def validate_basic(self, clock: Optional[Clock] = None) -> None:
        """
        Check the essential business rules of a book.

        Must be called before every persistence write.

        Raises:
            MissingFieldError: If title or author is empty after trimming
            InvalidYearError: If year is outside [1450, current year]
            InvalidISBNError: If the ISBN fails shape or checksum validation
        """
        if not self.title.strip():
            raise MissingFieldError("title is required")
        if not self.author.strip():
            raise MissingFieldError("author is required")
        validate_year(self.year, clock)
        validate_isbn(self.isbn)

    def apply_update(self, changes: UpdateInput, clock: Optional[Clock] = None) -> None:
        """
        Merge a sparse patch into this book, in place.

        Present fields are trimmed (title/author/genre) or normalized (isbn)
        and overwrite the current value. updated_at is always refreshed,
        even for an empty patch. id and created_at never change.

        Args:
            changes: Patch with the fields to overwrite
            clock: Time source for updated_at (defaults to system UTC clock)
        """
        if changes.title is not None:
            self.title = changes.title.strip()
        if changes.author is not None:
            self.author = changes.author.strip()
        if changes.year is not None:
            self.year = changes.year
        if changes.genre is not None:
            self.genre = changes.genre.strip()
        if changes.isbn is not None:
            self.isbn = normalize_isbn(changes.isbn)

        self.updated_at = (clock or _default_clock).now()

    @staticmethod
    def create_new(
        title: str,
        author: str,
        year: int,
        genre: str,
        isbn: str,
        *,
        clock: Optional[Clock] = None,
    ) -> "Book":
        """
        Factory method to build a new, not-yet-persisted book.

        Args:
            title: Book title (whitespace trimmed)
            author: Author name (whitespace trimmed)
            year: Publication year
            genre: Genre (whitespace trimmed)
            isbn: ISBN in any common notation (normalized)
            clock: Time source for the timestamps

        Returns:
            A Book with id 0 and created_at == updated_at == now
        """
        now = (clock or _default_clock).now()
        return Book(
            title=title.strip(),
            author=author.strip(),
            year=year,
            genre=genre.strip(),
            isbn=normalize_isbn(isbn),
            created_at=now,
            updated_at=now,
        )
