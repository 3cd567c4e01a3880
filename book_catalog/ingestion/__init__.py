"""
Ingestion package - bulk loading of book records into the catalog.
"""

from .import_service import CatalogImportService

__all__ = ["CatalogImportService"]
