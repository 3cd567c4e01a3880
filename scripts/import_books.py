#!/usr/bin/env python3
"""
Book Import Script.

This script loads book records from a JSON file (a list of objects with
title, author, year, genre and isbn) and creates them in the SQLite catalog.
Duplicates are skipped; invalid records are reported.

Usage:
    python -m scripts.import_books --file data/books.json
    python -m scripts.import_books --file data/books.json --db-path data/catalog.db
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from book_catalog.domain.services import BookService
from book_catalog.infrastructure.db.sqlite_book_repository import SqliteBookRepository
from book_catalog.ingestion.import_service import CatalogImportService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data/catalog.db")


def load_records(path: Path) -> list:
    """
    Read book records from a JSON file.

    Raises:
        ValueError: If the file does not contain a JSON list
    """
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of book objects")
    return data


def main(file_path: Path, db_path: Path = DEFAULT_DB_PATH) -> int:
    """
    Main entry point for the import script.

    Args:
        file_path: JSON file with book records
        db_path: SQLite database to import into

    Returns:
        Process exit code: 0 if every record was created or skipped, 1 otherwise
    """
    logger.info(f"Starting import: file='{file_path}', db='{db_path}'")

    try:
        records = load_records(file_path)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {file_path}: {e}")
        return 1

    service = BookService(book_repo=SqliteBookRepository(db_path))
    summary = CatalogImportService(service).import_records(records)

    print(f"Read:    {summary.n_read}")
    print(f"Created: {summary.n_created}")
    print(f"Skipped: {summary.n_skipped}")
    print(f"Errors:  {summary.n_errors}")
    for message in summary.errors:
        print(f"  - {message}")

    return 1 if summary.n_errors else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Import book records from a JSON file into the catalog"
    )
    parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="JSON file containing a list of book objects"
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})"
    )

    args = parser.parse_args()
    sys.exit(main(args.file, args.db_path))
