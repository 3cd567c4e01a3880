"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from dataclasses import asdict
from typing import Optional

from book_catalog.domain import entities as domain
from book_catalog.domain import value_objects as domain_vo
from book_catalog.api.v1 import schemas as api


def domain_book_to_api(book: domain.Book) -> api.BookResponse:
    """
    Convert a domain Book entity to an API Book model.
    """
    return api.BookResponse(**asdict(book))


def api_update_to_domain(request: api.BookUpdateRequest) -> domain_vo.UpdateInput:
    """
    Convert an API update request to a domain UpdateInput patch.

    Only fields the client actually sent are carried over; an explicit
    null is treated the same as an absent field.
    """
    return domain_vo.UpdateInput(**request.model_dump(exclude_unset=True))


def query_params_to_filter(
    title: Optional[str] = None,
    author: Optional[str] = None,
    genre: Optional[str] = None,
    year: Optional[int] = None,
) -> domain_vo.SearchFilter:
    """
    Convert search query parameters to a domain SearchFilter.
    """
    return domain_vo.SearchFilter(
        title=title,
        author=author,
        genre=genre,
        year=year,
    )
