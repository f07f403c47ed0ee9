"""
Book Queries

The database access layer. Route handlers never build SQL themselves;
they go through BookQueries, which exposes exactly three operations:

- count_books(): number of rows in the books table
- list_books(): every row, in whatever order the store returns them
- create_book(params): insert one row and return it as persisted

Errors are not caught here. SQLAlchemyError propagates to the handler,
which decides whether to degrade, surface or swallow it.
"""

from collections.abc import Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from bookstore.models import Book
from bookstore.schemas import BookCreate


class BookQueries:
    """
    Query interface over a single session.

    Usage:
        queries = BookQueries(db)
        total = queries.count_books()
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_books(self) -> int:
        stmt = select(func.count()).select_from(Book)
        return self.session.execute(stmt).scalar_one()

    def list_books(self) -> Sequence[Book]:
        # No ORDER BY: callers must not rely on row order
        stmt = select(Book)
        return self.session.execute(stmt).scalars().all()

    def create_book(self, params: BookCreate) -> Book:
        """
        Insert a book and return the persisted row.

        Uses INSERT ... RETURNING so the store-assigned id and server
        defaults come back in the same round trip.

        Raises:
            SQLAlchemyError: If the insert or commit fails; the session is
                left for the caller to roll back
        """
        stmt = insert(Book).values(**params.model_dump()).returning(Book)
        book = self.session.execute(stmt).scalar_one()
        self.session.commit()
        return book
