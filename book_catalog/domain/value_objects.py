"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass(frozen=True)
class UpdateInput:
    """
    Sparse patch applied to an existing book.

    Every field is optional. When a field is None it is "absent" and the
    corresponding Book attribute is left unchanged.
    """

    title: Optional[str] = None
    """New title (trimmed before applying; empty is rejected)"""

    author: Optional[str] = None
    """New author (trimmed before applying; empty is rejected)"""

    year: Optional[int] = None
    """New publication year"""

    genre: Optional[str] = None
    """New genre (trimmed before applying; empty is allowed)"""

    isbn: Optional[str] = None
    """New ISBN (normalized before applying)"""

    def is_empty(self) -> bool:
        """Check if the patch sets no fields at all."""
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class SearchFilter:
    """
    Criteria for searching the catalog.

    All criteria are optional. When a criterion is None, it means "no restriction".
    A filter with no criteria matches every book.
    """

    title: Optional[str] = None
    """Case-insensitive substring of the title"""

    author: Optional[str] = None
    """Case-insensitive substring of the author"""

    genre: Optional[str] = None
    """Case-insensitive substring of the genre"""

    year: Optional[int] = None
    """Exact publication year"""

    def is_empty(self) -> bool:
        """Check if no criteria are set."""
        return all(
            getattr(self, field_name) is None
            for field_name in ["title", "author", "genre", "year"]
        )


@dataclass(frozen=True)
class ImportSummary:
    """
    Summary of a bulk import.

    This value object captures the outcome of importing book records
    into the catalog through the use-case service.
    """

    n_read: int
    """Number of records read from the input"""

    n_created: int
    """Number of books successfully created"""

    n_skipped: int
    """Number of records skipped because their ISBN already exists"""

    n_errors: int
    """Number of records rejected by validation or malformed"""

    errors: list[str] = field(default_factory=list)
    """Error messages for rejected records"""

    def __post_init__(self) -> None:
        """Validate summary constraints."""
        for name in ("n_read", "n_created", "n_skipped", "n_errors"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")

        # Invariant: read = created + skipped + errors
        expected_read = self.n_created + self.n_skipped + self.n_errors
        if self.n_read != expected_read:
            raise ValueError(
                f"Invariant violated: n_read ({self.n_read}) must equal "
                f"n_created + n_skipped + n_errors ({expected_read})"
            )
