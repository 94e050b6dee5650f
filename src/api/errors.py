"""Exception handlers that render every error as ``{"message": ...}``."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)


def fault_message(method: str, book_id: str | None) -> str:
    """Generic message for an unexpected failure while handling a request."""
    if method == "POST":
        return "Unable to create new book"
    if method == "PUT":
        return f"Unable to edit the book with id {book_id}"
    return f"Unable to fetch the book with id {book_id}"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """A body that is not a JSON object is an internal fault, not a 422."""
    logger.warning(
        "Malformed request body",
        method=request.method,
        path=request.url.path,
        errors=exc.errors(),
    )
    book_id = request.path_params.get("book_id")
    return JSONResponse(
        status_code=500,
        content={"message": fault_message(request.method, book_id)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
