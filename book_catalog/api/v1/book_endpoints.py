"""
API endpoints for book catalog operations.

This module defines the FastAPI routes for creating, reading, updating,
deleting and searching books. It handles HTTP concerns and delegates to
the BookService use cases.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from book_catalog.domain.errors import BookError, ErrorKind
from book_catalog.domain.ports import BookRepository
from book_catalog.domain.services import BookService
from book_catalog.api.v1 import schemas as api
from book_catalog.api.v1.converters import (
    api_update_to_domain,
    domain_book_to_api,
    query_params_to_filter,
)
from book_catalog.api.v1.dependencies import get_book_repository, get_book_service

router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ISBN: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_YEAR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def _to_http_error(error: BookError) -> HTTPException:
    """Map a domain error to the matching HTTP error."""
    return HTTPException(
        status_code=_STATUS_BY_KIND[error.kind],
        detail=str(error),
    )


@router.post("/books", response_model=api.BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    request: api.BookCreateRequest,
    service: BookService = Depends(get_book_service),
) -> api.BookResponse:
    """
    Create a new book.

    Raises:
        400: Missing title/author, invalid year or invalid ISBN
        409: ISBN already exists
    """
    try:
        book = service.create_book(
            title=request.title,
            author=request.author,
            year=request.year,
            genre=request.genre,
            isbn=request.isbn,
        )
    except BookError as e:
        raise _to_http_error(e)

    return domain_book_to_api(book)


@router.get("/books", response_model=List[api.BookResponse])
def list_books(
    service: BookService = Depends(get_book_service),
) -> List[api.BookResponse]:
    """List every book, ordered by id."""
    return [domain_book_to_api(book) for book in service.search_books()]


@router.get("/books/search", response_model=List[api.BookResponse])
def search_books(
    title: Optional[str] = None,
    author: Optional[str] = None,
    genre: Optional[str] = None,
    year: Optional[int] = None,
    service: BookService = Depends(get_book_service),
) -> List[api.BookResponse]:
    """
    Search books by title/author/genre substring (case-insensitive) and exact year.

    Omitted parameters are not applied; with no parameters every book is returned.
    """
    book_filter = query_params_to_filter(title=title, author=author, genre=genre, year=year)
    return [domain_book_to_api(book) for book in service.search_books(book_filter)]


@router.get("/books/isbn/{isbn}", response_model=api.BookResponse)
def get_book_by_isbn(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> api.BookResponse:
    """
    Get a book by ISBN, in any notation (e.g. 978-3-16-148410-0).

    Raises:
        404: Book not found
    """
    try:
        book = service.get_book_by_isbn(isbn)
    except BookError as e:
        raise _to_http_error(e)

    return domain_book_to_api(book)


@router.get("/books/{book_id}", response_model=api.BookResponse)
def get_book_by_id(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> api.BookResponse:
    """
    Get a book by its identifier.

    Raises:
        400: id is 0
        404: Book not found
    """
    try:
        book = service.get_book_by_id(book_id)
    except BookError as e:
        raise _to_http_error(e)

    return domain_book_to_api(book)


@router.put("/books/{book_id}", response_model=api.BookResponse)
def update_book(
    book_id: int,
    request: api.BookUpdateRequest,
    service: BookService = Depends(get_book_service),
) -> api.BookResponse:
    """
    Partially update a book; only the fields present in the body change.

    Raises:
        400: Empty title/author, invalid year or invalid ISBN
        404: Book not found
        409: ISBN registered by another book
    """
    try:
        book = service.update_book(book_id, api_update_to_domain(request))
    except BookError as e:
        raise _to_http_error(e)

    return domain_book_to_api(book)


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    """
    Delete a book.

    Raises:
        404: Book not found
    """
    try:
        service.delete_book(book_id)
    except BookError as e:
        raise _to_http_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health", response_model=api.HealthResponse)
def health_check(
    book_repo: BookRepository = Depends(get_book_repository),
) -> api.HealthResponse:
    """Check that the API is running and storage is reachable."""
    return api.HealthResponse(status="ok", books=book_repo.count())
