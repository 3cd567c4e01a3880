from .in_memory_book_repository import InMemoryBookRepository

__all__ = ["InMemoryBookRepository"]
