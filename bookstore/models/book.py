"""
Book Model

The only persisted entity of the Bookstore.

The database owns every Book row: identifiers are generated by the store
and never change after creation. The service keeps no in-memory copy and
re-reads the table on each request.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Book(Base):
    """
    Book model representing a store item.

    Table: books

    Fields:
    - title: Book title (required, may be empty)
    - author: Author name
    - price: Book price with 2 decimal precision

    Example:
        book = Book(title="Dune", author="Frank Herbert", price=Decimal("9.99"))
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Author name"
    )

    # Numeric(10, 2) = up to 10 digits, 2 after decimal point
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Book price in USD"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
