"""
Pydantic Schemas Package

Schema Naming Convention:
- XxxBase: Shared fields between create and response
- XxxCreate: Fields accepted when creating a new record
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
)

__all__ = [
    "BookBase",
    "BookCreate",
    "BookResponse",
]
