"""
Routers Package

Router Structure:
- home.py: GET / (HTML landing page)
- books.py: GET /books and POST /books (JSON)

Each router is imported and registered in main.py.
"""

from bookstore.routers.books import router as books_router
from bookstore.routers.home import router as home_router

__all__ = [
    "books_router",
    "home_router",
]
