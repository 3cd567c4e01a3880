"""
API request/response models for the v1 book endpoints.
"""

from pydantic import BaseModel, Field, AwareDatetime


# request body of post /books
class BookCreateRequest(BaseModel):
    """
    Request body for POST /books.

    Business rules (non-empty title/author, year range, ISBN checksum) are
    enforced by the domain, not here, so errors are reported consistently.
    """
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    year: int = Field(description="Publication year (1450 to current year)")
    genre: str = Field(default="", description="Free-text genre")
    isbn: str = Field(description="ISBN-10 or ISBN-13, hyphens and spaces allowed")


# request body of put /books/{id}
class BookUpdateRequest(BaseModel):
    """
    Request body for PUT /books/{book_id}.

    Every field is optional: only the fields actually sent are applied.
    """
    title: str | None = None
    author: str | None = None
    year: int | None = None
    genre: str | None = None
    isbn: str | None = None


class BookResponse(BaseModel):
    """
    API representation of a Book entity.

    Maps from the domain Book entity for API responses.
    """

    id: int = Field(description="Identifier assigned by the catalog")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    year: int = Field(description="Publication year")
    genre: str = Field(description="Free-text genre")
    isbn: str = Field(description="Normalized ISBN")
    created_at: AwareDatetime = Field(description="When this book was added to the catalog")
    updated_at: AwareDatetime = Field(description="When this book was last updated")


class HealthResponse(BaseModel):
    status: str
    books: int
