"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

Following Hexagonal Architecture principles, the domain layer depends only
on these abstract protocols, never on concrete implementations.
"""

from typing import Protocol, List, Optional

from .entities import Book
from .utils.clock import Clock
from .value_objects import SearchFilter

__all__ = ["BookRepository", "Clock"]


class BookRepository(Protocol):
    """
    Port for persisting and retrieving books from the catalog.

    This repository is responsible for CRUD operations on Book entities.
    It abstracts away the persistence mechanism (SQLite, in-memory, etc.).

    Implementations MUST:
    - Enforce ISBN uniqueness at the storage level (the service pre-check
      is only a fast-fail; concurrent writers can race past it)
    - Assign the identifier on create
    - Return listings ordered by identifier ascending
    """

    def create(self, book: Book) -> None:
        """
        Persist a new book and assign its identifier.

        Args:
            book: A validated, not-yet-persisted book. Its id is set as a
                side effect.

        Raises:
            ConflictError: If another book already has the same ISBN
            RuntimeError: If a storage error occurs
        """
        ...

    def update(self, book: Book) -> Book:
        """
        Persist all mutable fields of an existing book.

        Args:
            book: The book to store, identified by book.id

        Returns:
            The stored post-update view (authoritative over the input)

        Raises:
            BookNotFoundError: If no book has this id
            ConflictError: If another book already has the same ISBN
            RuntimeError: If a storage error occurs
        """
        ...

    def delete(self, book_id: int) -> None:
        """
        Delete a book from the catalog.

        Raises:
            BookNotFoundError: If no book has this id
        """
        ...

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """
        Retrieve a book by its identifier.

        Returns:
            The Book entity if found, None otherwise
        """
        ...

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """
        Retrieve a book by ISBN. The argument is normalized before lookup.

        Returns:
            The Book entity if found, None otherwise
        """
        ...

    def get_all(self) -> List[Book]:
        """
        Retrieve every book, ordered by identifier ascending.
        """
        ...

    def find_by_filter(self, book_filter: SearchFilter) -> List[Book]:
        """
        Retrieve books matching every set criterion of the filter.

        Title, author and genre match as case-insensitive substrings;
        year matches exactly.

        Returns:
            Matching books, ordered by identifier ascending
        """
        ...

    def count(self) -> int:
        """
        Get the total number of books in the catalog.
        """
        ...
