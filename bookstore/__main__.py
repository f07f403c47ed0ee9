"""Allow running the server with: python -m bookstore"""

from bookstore.cli import main

main()
