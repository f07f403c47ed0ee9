"""
Books Router

JSON endpoints for the books resource:
- GET /books: list every book
- POST /books: create a book

Errors are handled where they occur. A failed list is reported to the
caller as a 500; a failed create is logged and still answered with 201
and a zero-valued book, so callers cannot tell the two apart from the
status code alone.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookstore.dependencies import BookParams, DbSession, Queries
from bookstore.schemas import BookResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book in the store. Order is not guaranteed.",
    responses={500: {"description": "The list query failed"}},
)
def list_books(queries: Queries):
    """
    List all books.

    Returns:
        JSON array of books (empty array for an empty store), or a 500
        with the error text if the query fails
    """
    try:
        books = queries.list_books()
    except SQLAlchemyError as exc:
        logger.error(f"Error listing books: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description=(
        "Create a book from a JSON body. The body is bound leniently and "
        "the response is always 201."
    ),
)
def create_book(
    params: BookParams,
    queries: Queries,
    db: DbSession,
) -> BookResponse:
    """
    Create a new book.

    Args:
        params: Body bound to BookCreate, or defaults if binding failed
        queries: Book query layer
        db: Request session, rolled back if the insert fails

    Returns:
        The persisted book, or BookResponse.zero() if the insert failed
    """
    try:
        book = queries.create_book(params)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning(f"Error creating book: {exc}")
        return BookResponse.zero()

    return BookResponse.model_validate(book)
