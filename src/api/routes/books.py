"""Book CRUD endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request
from fastapi.exceptions import RequestValidationError

from src.api.errors import fault_message
from src.api.schemas.books import Book, BookEnvelope, BookInput, MessageResponse
from src.core.books.store import BookStore, get_book_store

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])

BookId = Annotated[str, Path(description="The id of the book")]
Store = Annotated[BookStore, Depends(get_book_store)]

ERROR_RESPONSES = {
    404: {"model": MessageResponse, "description": "Not Found"},
    500: {"model": MessageResponse, "description": "Server Error"},
}


async def book_payload(
    request: Request,
    payload: Annotated[BookInput | None, Body()] = None,
) -> BookInput:
    """Request body, with an empty body read as an empty object.

    A JSON ``null`` body is still rejected as malformed.
    """
    if payload is None:
        if await request.body():
            raise RequestValidationError(
                [
                    {
                        "type": "model_attributes_type",
                        "loc": ("body",),
                        "msg": "Input should be an object",
                        "input": None,
                    }
                ]
            )
        return BookInput()
    return payload


Payload = Annotated[BookInput, Depends(book_payload)]


def not_found(book_id: str) -> HTTPException:
    logger.debug("Book not found", book_id=book_id)
    return HTTPException(status_code=404, detail=f"The book with id {book_id} not found")


def internal_fault(method: str, book_id: str | None = None) -> HTTPException:
    logger.exception("Book request failed", method=method, book_id=book_id)
    return HTTPException(status_code=500, detail=fault_message(method, book_id))


@router.get(
    "",
    response_model=list[Book],
    response_model_exclude_unset=True,
    summary="Returns a list of books",
    responses={200: {"description": "Fetched Successfully"}},
)
async def list_books(store: Store) -> list[Book]:
    """Returns a comprehensive list of all books."""
    return store.list_books()


@router.get(
    "/{book_id}",
    response_model=BookEnvelope,
    response_model_exclude_unset=True,
    summary="Returns a specific book",
    responses={200: {"description": "Fetched Successfully"}, **ERROR_RESPONSES},
)
async def get_book(book_id: BookId, store: Store) -> BookEnvelope:
    """Returns a book with the parameter's id."""
    try:
        book = store.get_book(book_id)
    except Exception:
        raise internal_fault("GET", book_id)
    if book is None:
        raise not_found(book_id)
    return BookEnvelope(message=f"This is the book with id {book_id}", body=book)


@router.post(
    "",
    response_model=Book,
    response_model_exclude_unset=True,
    summary="Create a new book",
    responses={
        200: {"description": "Book created successfully"},
        500: ERROR_RESPONSES[500],
    },
)
async def create_book(payload: Payload, store: Store) -> Book:
    """Create a new book with given data."""
    try:
        return store.create_book(payload.supplied())
    except Exception:
        raise internal_fault("POST")


@router.put(
    "/{book_id}",
    response_model=BookEnvelope,
    response_model_exclude_unset=True,
    summary="Edits a specific book",
    responses={200: {"description": "Edited Successfully"}, **ERROR_RESPONSES},
)
async def update_book(book_id: BookId, payload: Payload, store: Store) -> BookEnvelope:
    """Replaces every field of the book with the parameter's id.

    Fields left out of the request body are cleared.
    """
    try:
        book = store.update_book(book_id, payload.supplied())
    except Exception:
        raise internal_fault("PUT", book_id)
    if book is None:
        raise not_found(book_id)
    return BookEnvelope(message=f"Successfully edited the book with id {book_id}", body=book)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Deletes a specific book",
    responses={200: {"description": "Deleted Successfully"}, **ERROR_RESPONSES},
)
async def delete_book(book_id: BookId, store: Store) -> MessageResponse:
    """Deletes the book with the parameter's id."""
    try:
        deleted = store.delete_book(book_id)
    except Exception:
        raise internal_fault("DELETE", book_id)
    if not deleted:
        raise not_found(book_id)
    return MessageResponse(message=f"Successfully deleted the book with id {book_id}")
