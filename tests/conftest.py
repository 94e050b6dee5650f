"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.core.books.store import BookStore, get_book_store
from src.main import app


@pytest.fixture
def store():
    """A fresh, empty book store."""
    return BookStore()


@pytest.fixture
def client(store):
    """Create a test client wired to the ``store`` fixture."""
    app.dependency_overrides[get_book_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_book():
    """Request body for a complete book."""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "publishedDate": "1965-08-01",
        "summary": "A desert planet and the spice it guards.",
    }
