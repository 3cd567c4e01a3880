"""
Use-case service for the book catalog.

=============================================================================
TEACHING NOTES: Where does policy live?
=============================================================================

The entity knows how to validate and merge itself, and the repository knows
how to store rows. Neither decides *what counts as a duplicate* or *in which
order checks happen*. That is the job of this service:

    validate input -> build/fetch entity -> uniqueness check -> persist

Every failure is raised before any storage mutation, and nothing is retried.

=============================================================================
TEACHING NOTES: The uniqueness race
=============================================================================

create_book and update_book look up the ISBN before writing. Between that
lookup and the write, another request may insert the same ISBN. The
pre-check is therefore only a fast-fail that produces a friendly error; the
real guarantee is the storage layer's uniqueness constraint, which makes the
losing write raise ConflictError. No application-level lock is taken.
=============================================================================
"""

import logging
from typing import List, Optional

from ..entities import Book
from ..errors import BookNotFoundError, ConflictError, MissingFieldError
from ..ports import BookRepository, Clock
from ..utils.clock import SystemClock
from ..validators import normalize_isbn, validate_update_input
from ..value_objects import SearchFilter, UpdateInput

logger = logging.getLogger(__name__)


class BookService:
    """
    Orchestrates the book catalog use cases.

    The service depends only on the BookRepository port, so any storage
    engine honoring that contract can be injected.

    Usage:
        service = BookService(book_repo=SqliteBookRepository(Path("catalog.db")))
        book = service.create_book("Dune", "Frank Herbert", 1965, "Sci-Fi", "0-441-17271-7")
    """

    def __init__(self, book_repo: BookRepository, clock: Optional[Clock] = None) -> None:
        """
        Initialize the service with its dependencies.

        Args:
            book_repo: Storage port for books
            clock: Time source for year validation and timestamps
        """
        self._book_repo = book_repo
        self._clock = clock or SystemClock()

    def create_book(
        self,
        title: str,
        author: str,
        year: int,
        genre: str,
        isbn: str,
    ) -> Book:
        """
        Create and persist a new book.

        Returns:
            The persisted book, carrying its assigned id

        Raises:
            MissingFieldError: If title or author is missing
            InvalidYearError: If year is out of range
            InvalidISBNError: If the ISBN is invalid
            ConflictError: If the ISBN already exists
        """
        # Presence checks run before the entity is built
        if not title:
            raise MissingFieldError("title is required")
        if not author:
            raise MissingFieldError("author is required")

        book = Book.create_new(title, author, year, genre, isbn, clock=self._clock)
        book.validate_basic(self._clock)

        if self._book_repo.get_by_isbn(book.isbn) is not None:
            logger.warning(f"Rejected create: isbn {book.isbn} already exists")
            raise ConflictError(f"isbn {book.isbn} already exists")

        self._book_repo.create(book)
        logger.info(f"Created book {book.id} (isbn={book.isbn})")
        return book

    def update_book(self, book_id: int, changes: UpdateInput) -> Book:
        """
        Apply a sparse patch to an existing book.

        Returns:
            The repository's post-update view of the book

        Raises:
            MissingFieldError: If book_id is 0 or the patch empties title/author
            BookNotFoundError: If the book does not exist
            InvalidYearError: If the patched year is out of range
            InvalidISBNError: If the patched ISBN is invalid
            ConflictError: If the patched ISBN belongs to another book
        """
        if not book_id:
            raise MissingFieldError("id is required")

        current = self._book_repo.get_by_id(book_id)
        if current is None:
            raise BookNotFoundError(f"book {book_id} not found")

        validate_update_input(changes, self._clock)

        if changes.isbn is not None:
            owner = self._book_repo.get_by_isbn(normalize_isbn(changes.isbn))
            if owner is not None and owner.id != current.id:
                logger.warning(
                    f"Rejected update of book {book_id}: isbn owned by book {owner.id}"
                )
                raise ConflictError("isbn already registered by another book")

        current.apply_update(changes, self._clock)
        current.validate_basic(self._clock)

        updated = self._book_repo.update(current)
        logger.info(f"Updated book {book_id}")
        return updated

    def delete_book(self, book_id: int) -> None:
        """
        Delete a book by id.

        Raises:
            MissingFieldError: If book_id is 0
            BookNotFoundError: If the book does not exist
        """
        if not book_id:
            raise MissingFieldError("id is required")

        # Not-found is reported before any delete is attempted
        if self._book_repo.get_by_id(book_id) is None:
            raise BookNotFoundError(f"book {book_id} not found")

        self._book_repo.delete(book_id)
        logger.info(f"Deleted book {book_id}")

    def get_book_by_id(self, book_id: int) -> Book:
        """Fetch one book by id; raises MissingFieldError or BookNotFoundError."""
        if not book_id:
            raise MissingFieldError("id is required")

        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(f"book {book_id} not found")
        return book

    def get_book_by_isbn(self, isbn: str) -> Book:
        """Fetch one book by ISBN (any notation); raises MissingFieldError or BookNotFoundError."""
        normalized = normalize_isbn(isbn or "")
        if not normalized:
            raise MissingFieldError("isbn is required")

        book = self._book_repo.get_by_isbn(normalized)
        if book is None:
            raise BookNotFoundError(f"book with isbn {normalized} not found")
        return book

    def search_books(self, book_filter: Optional[SearchFilter] = None) -> List[Book]:
        """
        Search the catalog.

        An empty filter goes to get_all() so storage never has to deal with
        an empty WHERE clause.

        Returns:
            Matching books, ordered by id ascending
        """
        if book_filter is None or book_filter.is_empty():
            return self._book_repo.get_all()
        return self._book_repo.find_by_filter(book_filter)
