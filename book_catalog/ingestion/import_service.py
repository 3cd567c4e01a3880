"""
Bulk import for the book catalog.

This service feeds a batch of plain book records (e.g. parsed from a JSON
file) through BookService.create_book one by one:
1. Read each record
2. Create it through the use-case service (validation + uniqueness)
3. Count duplicates as skipped and invalid records as errors
4. Return a summary of the operation

Going through the service, instead of writing to the repository directly,
guarantees imported books obey exactly the same rules as API-created ones.
"""

import logging
from typing import Any, Iterable, Mapping

from book_catalog.domain.errors import BookError, ConflictError
from book_catalog.domain.services import BookService
from book_catalog.domain.value_objects import ImportSummary

logger = logging.getLogger(__name__)


class CatalogImportService:
    """
    Orchestrates bulk creation of books from plain records.

    A record is a mapping with keys: title, author, year, isbn and
    optionally genre.
    """

    def __init__(self, book_service: BookService) -> None:
        """
        Initialize the import service.

        Args:
            book_service: Use-case service that performs each create
        """
        self._book_service = book_service

    def import_records(self, records: Iterable[Mapping[str, Any]]) -> ImportSummary:
        """
        Create a book for every record, tolerating per-record failures.

        Args:
            records: Book records to import

        Returns:
            ImportSummary with statistics about the operation
        """
        logger.info("Starting catalog import")

        n_read = 0
        n_created = 0
        n_skipped = 0
        n_errors = 0
        error_messages = []

        for index, record in enumerate(records):
            n_read += 1
            label = f"record #{index}"
            if isinstance(record, Mapping) and record.get("isbn"):
                label = f"{label} (isbn={record['isbn']})"

            try:
                book = self._book_service.create_book(**self._record_to_kwargs(record))
                n_created += 1
                logger.debug(f"Imported book {book.id}: {book.title}")

            except ConflictError:
                n_skipped += 1
                logger.debug(f"Skipping duplicate: {label}")

            except KeyError as e:
                n_errors += 1
                error_msg = f"Failed to import {label}: missing field {e}"
                logger.warning(error_msg)
                error_messages.append(error_msg)

            except (BookError, TypeError) as e:
                n_errors += 1
                error_msg = f"Failed to import {label}: {e}"
                logger.warning(error_msg)
                error_messages.append(error_msg)

        logger.info(
            f"Import complete: {n_created} created, {n_skipped} skipped, {n_errors} errors"
        )

        return ImportSummary(
            n_read=n_read,
            n_created=n_created,
            n_skipped=n_skipped,
            n_errors=n_errors,
            errors=error_messages,
        )

    @staticmethod
    def _record_to_kwargs(record: Mapping[str, Any]) -> dict:
        """
        Extract create_book arguments from a raw record.

        Raises:
            TypeError: If the record is not a mapping or has badly typed values
            KeyError: If a required key is missing
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"expected an object, got {type(record).__name__}")

        year = record["year"]
        # bool is an int subclass; reject it along with strings and floats
        if isinstance(year, bool) or not isinstance(year, int):
            raise TypeError(f"year must be an integer, got {year!r}")

        fields = {
            "title": record["title"],
            "author": record["author"],
            "genre": record.get("genre") or "",
            "isbn": record["isbn"],
        }
        for name, value in fields.items():
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {value!r}")

        return {**fields, "year": year}
