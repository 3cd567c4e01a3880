"""
Validation rules for book data.

=============================================================================
TEACHING NOTES: ISBN checksums
=============================================================================

An ISBN carries its own check digit, so most typos can be caught without
asking any external registry.

ISBN-10 (9 digits + check digit or 'X'):
    sum((10 - i) * d[i] for i in 0..9) % 11 == 0
    where a trailing 'X' counts as 10.

ISBN-13 (13 digits, EAN-13 scheme):
    s = sum(d[i] * (1 if i is even else 3) for i in 0..11)
    check digit == (10 - s % 10) % 10

Both schemes catch every single-digit substitution except the few that
leave the weighted sum unchanged modulo the scheme's base.

Shapes are matched with [0-9] rather than \\d: Python's \\d also accepts
non-ASCII digits (e.g. Arabic-Indic), which are not valid in an ISBN.
=============================================================================
"""

import re
from typing import Optional

from .errors import InvalidISBNError, InvalidYearError, MissingFieldError
from .utils.clock import Clock, SystemClock
from .value_objects import UpdateInput

MIN_PUBLICATION_YEAR = 1450
"""Earliest accepted publication year (movable-type printing)"""

_ISBN10_PATTERN = re.compile(r"[0-9]{9}[0-9X]")
_ISBN13_PATTERN = re.compile(r"[0-9]{13}")

_default_clock = SystemClock()


def normalize_isbn(isbn: str) -> str:
    """
    Normalize an ISBN for storage and comparison.

    Removes hyphens and spaces, then strips surrounding whitespace, and
    uppercases (so a trailing 'x' becomes 'X'). Length and checksum are not
    checked. Idempotent: normalize_isbn(normalize_isbn(x)) == normalize_isbn(x).
    """
    # Separators go first, or "-\t978..." would keep its tab until a second pass
    return isbn.replace("-", "").replace(" ", "").strip().upper()


def _isbn10_checksum_ok(isbn: str) -> bool:
    total = sum((10 - i) * int(ch) for i, ch in enumerate(isbn[:9]))
    check = 10 if isbn[9] == "X" else int(isbn[9])
    return (total + check) % 11 == 0


def _isbn13_checksum_ok(isbn: str) -> bool:
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(isbn[:12]))
    expected = (10 - total % 10) % 10
    return int(isbn[12]) == expected


def validate_isbn(isbn: str) -> None:
    """
    Validate an ISBN-10 or ISBN-13, including its check digit.

    The value is normalized first, so "978-84-18037-01-6" is accepted.

    Args:
        isbn: Raw or normalized ISBN

    Raises:
        InvalidISBNError: If the shape matches neither format or the
            checksum fails
    """
    normalized = normalize_isbn(isbn)

    if _ISBN10_PATTERN.fullmatch(normalized):
        if not _isbn10_checksum_ok(normalized):
            raise InvalidISBNError("invalid ISBN-10 checksum")
        return

    if _ISBN13_PATTERN.fullmatch(normalized):
        if not _isbn13_checksum_ok(normalized):
            raise InvalidISBNError("invalid ISBN-13 checksum")
        return

    raise InvalidISBNError("isbn must be ISBN-10 or ISBN-13 format")


def validate_year(year: int, clock: Optional[Clock] = None) -> None:
    """
    Ensure a publication year lies in [1450, current UTC year].

    The current year is read from the clock on every call, never cached.

    Raises:
        InvalidYearError: If the year is out of range
    """
    current_year = (clock or _default_clock).now().year
    if year < MIN_PUBLICATION_YEAR or year > current_year:
        raise InvalidYearError(
            f"year must be between {MIN_PUBLICATION_YEAR} and current year"
        )


def validate_update_input(changes: UpdateInput, clock: Optional[Clock] = None) -> None:
    """
    Validate only the fields present in a patch.

    Absent (None) fields are not checked. Genre is free text and never rejected.

    Raises:
        MissingFieldError: If a present title/author is empty after trimming
        InvalidYearError: If a present year is out of range
        InvalidISBNError: If a present ISBN is invalid
    """
    if changes.title is not None and not changes.title.strip():
        raise MissingFieldError("title cannot be empty")
    if changes.author is not None and not changes.author.strip():
        raise MissingFieldError("author cannot be empty")
    if changes.year is not None:
        validate_year(changes.year, clock)
    if changes.isbn is not None:
        validate_isbn(changes.isbn)
