"""
Server Entry Point

Loads and validates the configuration before anything else is imported,
so that neither the engine nor the app is built from a bad .env file.

Run with: python -m bookstore (or the "bookstore" console script)
"""

import logging
import sys

import uvicorn

from bookstore.config import ConfigurationError, configure_logging, load_settings

# The listening port is fixed; only the bind address is configurable.
PORT = 8080

logger = logging.getLogger(__name__)


def main(env_file: str = ".env") -> None:
    """
    Start the server.

    The env file is required: if it is missing, unreadable or holds an
    invalid value, the process logs the reason and exits with status 1
    before serving any request.
    """
    try:
        settings = load_settings(env_file)
    except ConfigurationError as exc:
        configure_logging("INFO")
        logger.critical(str(exc))
        sys.exit(1)

    configure_logging(settings.log_level)

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=PORT,
        reload=settings.debug,
    )
