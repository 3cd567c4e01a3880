"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of repositories and services
for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from book_catalog.domain.ports import BookRepository
from book_catalog.domain.services import BookService
from book_catalog.infrastructure.db.sqlite_book_repository import SqliteBookRepository
from book_catalog.infrastructure.memory.in_memory_book_repository import InMemoryBookRepository

logger = logging.getLogger(__name__)

# Configuration from environment
DB_PATH = Path(os.getenv("DB_PATH", "data/catalog.db"))
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite")

# Module-level singletons (initialized lazily)
_book_repository: Optional[BookRepository] = None
_book_service: Optional[BookService] = None


def build_book_repository(backend: str, db_path: Path) -> BookRepository:
    """
    Create the repository for a storage backend name.

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend == "sqlite":
        return SqliteBookRepository(db_path)
    if backend == "memory":
        return InMemoryBookRepository()
    raise ValueError(f"STORAGE_BACKEND must be 'sqlite' or 'memory', got '{backend}'")


def get_book_repository() -> BookRepository:
    """Provide a singleton instance of the book repository."""
    global _book_repository
    if _book_repository is None:
        logger.info(f"Using '{STORAGE_BACKEND}' storage backend")
        _book_repository = build_book_repository(STORAGE_BACKEND, DB_PATH)
    return _book_repository


def get_book_service() -> BookService:
    """Provide the Book Service with its repository wired."""
    global _book_service
    if _book_service is None:
        _book_service = BookService(book_repo=get_book_repository())
    return _book_service


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject mock dependencies by resetting
    the module state between test cases.
    """
    global _book_repository, _book_service

    _book_repository = None
    _book_service = None
