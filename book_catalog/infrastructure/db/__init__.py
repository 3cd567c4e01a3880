from .sqlite_book_repository import SqliteBookRepository

__all__ = ["SqliteBookRepository"]
