"""
Book Pydantic Schemas

Every field carries a zero value. POST /books binds its body leniently:
fields that fail validation keep their defaults instead of rejecting the
request, and when an insert fails the handler answers with
BookResponse.zero(). Length and precision limits are left to the database.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        default="",
        description="Book title",
        examples=["Dune", "1984"],
    )

    author: str | None = Field(
        default=None,
        description="Author name",
        examples=["Frank Herbert"],
    )

    price: Decimal | None = Field(
        default=None,
        description="Book price in USD",
        examples=["9.99"],
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "price": "9.99"
    }
    """


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    created_at: datetime | None = Field(
        default=None,
        description="When the book was created",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "author": "Frank Herbert",
                "price": "9.99",
                "created_at": "2024-01-15T10:30:00Z",
            }
        },
    )

    @classmethod
    def zero(cls) -> "BookResponse":
        """Zero-valued book, answered when an insert did not happen."""
        return cls(id=0)
