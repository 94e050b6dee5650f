"""Book management module."""

from src.core.books.store import BookStore, get_book_store

__all__ = ["BookStore", "get_book_store"]
