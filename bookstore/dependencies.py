"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

- DbSession: one SQLAlchemy session per request
- Queries: the BookQueries access layer over that session
- BookParams: the POST /books body, bound leniently

Tests replace get_db or get_queries through app.dependency_overrides.
"""

import json
import logging
from typing import Annotated

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from bookstore.database import get_db
from bookstore.queries import BookQueries
from bookstore.schemas import BookCreate

logger = logging.getLogger(__name__)

DbSession = Annotated[Session, Depends(get_db)]


def get_queries(db: DbSession) -> BookQueries:
    """Build the query layer for the current request session."""
    return BookQueries(db)


Queries = Annotated[BookQueries, Depends(get_queries)]


async def bind_book_params(request: Request) -> BookCreate:
    """
    Bind the request body to BookCreate without ever rejecting it.

    Fields are bound independently: a field that is null or fails
    validation keeps its default while the others are kept as submitted.
    An empty body, malformed JSON or a JSON value that is not an object
    binds to BookCreate() with every field at its default.

    Returns:
        The parsed parameters, with defaults for anything unbindable
    """
    body = await request.body()
    try:
        data = json.loads(body)
    except ValueError:
        logger.debug("Ignoring book body that is not valid JSON")
        return BookCreate()

    if not isinstance(data, dict):
        logger.debug(f"Ignoring book body of type {type(data).__name__}")
        return BookCreate()

    try:
        return BookCreate.model_validate(data)
    except ValidationError as exc:
        rejected = {error["loc"][0] for error in exc.errors() if error["loc"]}
        logger.debug(f"Ignoring unbindable book fields: {sorted(rejected)}")

    return BookCreate.model_validate(
        {key: value for key, value in data.items() if key not in rejected}
    )


BookParams = Annotated[BookCreate, Depends(bind_book_params)]
