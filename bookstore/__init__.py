"""
Bookstore Application Package

A small FastAPI service over a single "books" table.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, connection pool and session management
- queries.py: Database access layer (count, list, create)
- dependencies.py: Dependency injection functions
- templating.py: Jinja2 template renderer
- main.py: FastAPI application factory and entry point
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: Route handlers
"""

__version__ = "0.1.0"
