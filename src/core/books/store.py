"""In-memory book storage."""

import threading
import time
from typing import Any, Callable, Optional

import structlog

from src.api.schemas.books import Book

logger = structlog.get_logger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class BookStore:
    """Simple in-memory store for books.

    Books are kept in insertion order and looked up by linear scan. Deleting a
    book shifts every later book one position to the left.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._books: list[Book] = []
        self._clock = clock
        self._last_id = 0
        self._lock = threading.RLock()

    def _next_id(self) -> str:
        """Millisecond timestamp, bumped past the last issued id on collision."""
        stamp = max(self._clock(), self._last_id + 1)
        self._last_id = stamp
        return str(stamp)

    def _index_of(self, book_id: str) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return -1

    def list_books(self) -> list[Book]:
        """List all books in storage order."""
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: str) -> Optional[Book]:
        """Get a book by ID."""
        with self._lock:
            index = self._index_of(book_id)
            return self._books[index] if index != -1 else None

    def create_book(self, fields: dict[str, Any]) -> Book:
        """Create a book from the supplied fields and append it."""
        with self._lock:
            book = Book(id=self._next_id(), **fields)
            self._books.append(book)
        logger.info("Book created", book_id=book.id)
        return book

    def update_book(self, book_id: str, fields: dict[str, Any]) -> Optional[Book]:
        """Replace every field except the id.

        Fields missing from ``fields`` end up unset on the stored book.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                return None
            book = Book(id=book_id, **fields)
            self._books[index] = book
        logger.info("Book updated", book_id=book_id)
        return book

    def delete_book(self, book_id: str) -> bool:
        """Remove a book. Returns False if no book has this ID."""
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                return False
            del self._books[index]
        logger.info("Book deleted", book_id=book_id)
        return True

    def count(self) -> int:
        """Number of stored books."""
        with self._lock:
            return len(self._books)


# Singleton instance
_store: BookStore | None = None


def get_book_store() -> BookStore:
    """Get or create the book store singleton."""
    global _store
    if _store is None:
        _store = BookStore()
    return _store
