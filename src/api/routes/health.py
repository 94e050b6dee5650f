"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.books.store import BookStore, get_book_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> dict:
    """Readiness check - verifies the book store is reachable."""
    return {"status": "ready", "books": store.count()}


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
