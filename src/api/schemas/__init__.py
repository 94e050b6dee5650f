"""API schemas."""

from src.api.schemas.books import Book, BookEnvelope, BookInput, MessageResponse

__all__ = ["Book", "BookEnvelope", "BookInput", "MessageResponse"]
