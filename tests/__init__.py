"""
Test Suite for the Bookstore

Test Organization:
- conftest.py: Shared fixtures (test database, client, failure injection)
- test_home.py: GET /
- test_books.py: GET /books and POST /books
- test_queries.py: Database access layer
- test_config.py: Settings and startup loading
- test_database.py: Engine options
- test_main.py: Application factory
- test_cli.py: Server entry point

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
