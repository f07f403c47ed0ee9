"""
Tests for the Application Factory

Covers the request log middleware and the catch-all exception handler.
"""

import logging

from fastapi import status
from fastapi.testclient import TestClient

from bookstore.main import create_app


class TestRequestLogging:
    def test_request_is_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="bookstore.main"):
            client.get("/books")

        assert "GET /books 200" in caplog.text


class TestExceptionHandler:
    def test_unhandled_error_returns_json_500(self):
        app = create_app()

        @app.get("/boom")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/boom")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "An internal error occurred."}
