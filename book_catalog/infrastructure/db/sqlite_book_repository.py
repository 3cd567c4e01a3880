"""
SQLite implementation of the BookRepository port.

This adapter persists Book entities to a SQLite database, handling
serialization/deserialization and enforcing the unique constraint on isbn.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, UTC
from pathlib import Path
from typing import Iterator, List, Optional

from book_catalog.domain.entities import Book
from book_catalog.domain.errors import BookNotFoundError, ConflictError
from book_catalog.domain.ports import BookRepository
from book_catalog.domain.validators import normalize_isbn
from book_catalog.domain.value_objects import SearchFilter

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, author, year, genre, isbn, created_at, updated_at"


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqliteBookRepository(BookRepository):
    """
    The unique constraint on isbn is the authoritative duplicate guard: the
    service pre-check can race with concurrent writers, this cannot.
    """

    def __init__(self, db_path: Path) -> None:
        """
        Initialize the repository with a database path
        """
        self._db_path = db_path
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection that commits on success, rolls back on error, and always closes."""
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row # Needed to access by name column and not a number
        # SQLite's LOWER() only folds ASCII; use Python's casefold for search
        conn.create_function("CASEFOLD", 1, str.casefold, deterministic=True)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_schema(self) -> None:
        """Create the books table if it doesn't exist."""
        with self._connect() as conn:
            conn.execute("""
            CREATE TABLE IF NOT EXISTS books (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                author TEXT NOT NULL,
                year INTEGER NOT NULL,
                genre TEXT NOT NULL DEFAULT '',
                isbn TEXT NOT NULL UNIQUE,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_books_title ON books(title)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_books_author ON books(author)")

    def _book_to_row(self, book: Book) -> dict:
        """Convert a Book entity to a database row dict."""
        return {
            "id": book.id,
            "title": book.title.strip(),
            "author": book.author.strip(),
            "year": book.year,
            "genre": book.genre.strip(),
            "isbn": normalize_isbn(book.isbn),
            "created_at": book.created_at.astimezone(UTC).isoformat(),
            "updated_at": book.updated_at.astimezone(UTC).isoformat(),
        }

    def _parse_timestamp(self, value: str) -> datetime:
        """Parse a stored ISO timestamp as an aware UTC datetime."""
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)

    def _row_to_book(self, row: sqlite3.Row) -> Book:
        """Convert a database row to a Book entity."""
        return Book(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            year=row["year"],
            genre=row["genre"],
            isbn=row["isbn"],
            created_at=self._parse_timestamp(row["created_at"]),
            updated_at=self._parse_timestamp(row["updated_at"]),
        )

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        with self._connect() as conn:
            result = conn.execute("SELECT COUNT(*) as cnt FROM books").fetchone()
            return result["cnt"]

    def create(self, book: Book) -> None:
        """Insert a new book and assign its id."""
        row = self._book_to_row(book)

        try:
            with self._connect() as conn:
                cursor = conn.execute("""
                    INSERT INTO books
                    (title, author, year, genre, isbn, created_at, updated_at)
                    VALUES
                    (:title, :author, :year, :genre, :isbn, :created_at, :updated_at)
                """, row)
                book.id = cursor.lastrowid

        except sqlite3.IntegrityError as e:
            raise ConflictError(f"duplicate isbn: {row['isbn']}") from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while creating book: {e}") from e

        logger.debug(f"Inserted book {book.id} into {self._db_path}")

    def update(self, book: Book) -> Book:
        """Overwrite the mutable fields of an existing book."""
        row = self._book_to_row(book)

        try:
            with self._connect() as conn:
                cursor = conn.execute("""
                    UPDATE books
                    SET title = :title, author = :author, year = :year, genre = :genre,
                        isbn = :isbn, updated_at = :updated_at
                    WHERE id = :id
                """, row)

        except sqlite3.IntegrityError as e:
            raise ConflictError(f"duplicate isbn: {row['isbn']}") from e
        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while updating book: {e}") from e

        if cursor.rowcount == 0:
            raise BookNotFoundError(f"book {book.id} not found")

        updated = self.get_by_id(book.id)
        if updated is None:
            # Deleted by a concurrent request between the UPDATE and the read-back
            raise BookNotFoundError(f"book {book.id} not found")
        return updated

    def delete(self, book_id: int) -> None:
        """Delete a book from the catalog."""
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    "DELETE FROM books WHERE id = ?",
                    (book_id,)
                )

        except sqlite3.Error as e:
            raise RuntimeError(f"Database error while deleting book: {e}") from e

        if cursor.rowcount == 0:
            raise BookNotFoundError(f"book {book_id} not found")

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Retrieve a book by its id."""
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM books WHERE id = ?",
                (book_id,)
            ).fetchone()

            if row is None:
                return None

            return self._row_to_book(row)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by ISBN (normalized before lookup)."""
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM books WHERE isbn = ?",
                (normalize_isbn(isbn),)
            ).fetchone()

            if row is None:
                return None

            return self._row_to_book(row)

    def get_all(self) -> List[Book]:
        """Retrieve all books from the catalog."""
        with self._connect() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM books ORDER BY id"
            ).fetchall()

            return [self._row_to_book(row) for row in rows]

    def find_by_filter(self, book_filter: SearchFilter) -> List[Book]:
        """Retrieve books matching every set criterion."""
        clauses: List[str] = []
        params: List[object] = []

        for column in ("title", "author", "genre"):
            value = getattr(book_filter, column)
            if value is not None:
                clauses.append(f"CASEFOLD({column}) LIKE ? ESCAPE '\\'")
                params.append(f"%{_escape_like(value.strip().casefold())}%")

        if book_filter.year is not None:
            clauses.append("year = ?")
            params.append(book_filter.year)

        query = f"SELECT {_COLUMNS} FROM books"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY id"

        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
            return [self._row_to_book(row) for row in rows]
