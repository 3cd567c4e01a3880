"""
In-memory implementation of the BookRepository port.

Books live in a dict keyed by id, with a secondary index from ISBN to id.
Useful for tests, demos and the STORAGE_BACKEND=memory mode; nothing
survives a restart.
"""

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from book_catalog.domain.entities import Book
from book_catalog.domain.errors import BookNotFoundError, ConflictError
from book_catalog.domain.ports import BookRepository
from book_catalog.domain.validators import normalize_isbn
from book_catalog.domain.value_objects import SearchFilter


def _contains(haystack: str, needle: Optional[str]) -> bool:
    if needle is None:
        return True
    return needle.strip().casefold() in haystack.casefold()


class InMemoryBookRepository(BookRepository):
    """
    Thread-safe dict-backed repository.

    The lock plays the role of the storage transaction: the ISBN index check
    and the write happen atomically, so concurrent creates with the same
    ISBN cannot both succeed. Books are copied on the way in and out so
    callers never share state with the store.
    """

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._ids_by_isbn: Dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def create(self, book: Book) -> None:
        isbn = normalize_isbn(book.isbn)
        with self._lock:
            if isbn in self._ids_by_isbn:
                raise ConflictError(f"duplicate isbn: {isbn}")

            book.id = self._next_id
            self._next_id += 1
            self._books[book.id] = replace(book, isbn=isbn)
            self._ids_by_isbn[isbn] = book.id

    def update(self, book: Book) -> Book:
        isbn = normalize_isbn(book.isbn)
        with self._lock:
            stored = self._books.get(book.id)
            if stored is None:
                raise BookNotFoundError(f"book {book.id} not found")

            owner_id = self._ids_by_isbn.get(isbn)
            if owner_id is not None and owner_id != book.id:
                raise ConflictError(f"duplicate isbn: {isbn}")

            # created_at is set once and never overwritten
            updated = replace(book, isbn=isbn, created_at=stored.created_at)
            del self._ids_by_isbn[stored.isbn]
            self._ids_by_isbn[isbn] = book.id
            self._books[book.id] = updated
            return replace(updated)

    def delete(self, book_id: int) -> None:
        with self._lock:
            stored = self._books.pop(book_id, None)
            if stored is None:
                raise BookNotFoundError(f"book {book_id} not found")
            del self._ids_by_isbn[stored.isbn]

    def get_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            stored = self._books.get(book_id)
            return replace(stored) if stored is not None else None

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        with self._lock:
            book_id = self._ids_by_isbn.get(normalize_isbn(isbn))
            if book_id is None:
                return None
            return replace(self._books[book_id])

    def get_all(self) -> List[Book]:
        with self._lock:
            return [replace(self._books[book_id]) for book_id in sorted(self._books)]

    def find_by_filter(self, book_filter: SearchFilter) -> List[Book]:
        with self._lock:
            return [
                replace(book)
                for book_id, book in sorted(self._books.items())
                if _contains(book.title, book_filter.title)
                and _contains(book.author, book_filter.author)
                and _contains(book.genre, book_filter.genre)
                and (book_filter.year is None or book.year == book_filter.year)
            ]
