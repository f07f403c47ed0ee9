"""
Home Router

Serves the HTML landing page with the current number of books.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from bookstore.config import get_settings
from bookstore.dependencies import Queries
from bookstore.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Home"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Home page",
    description="Landing page showing how many books are in the store.",
)
def home(request: Request, queries: Queries) -> HTMLResponse:
    """
    Render the landing page.

    The count is display-only, so a failed count query degrades to 0
    instead of failing the page. The error is logged and the response is
    still 200.
    """
    try:
        book_count = queries.count_books()
    except SQLAlchemyError as exc:
        logger.error(f"Error counting books: {exc}")
        book_count = 0

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": get_settings().app_name,
            "count": book_count,
        },
    )
