"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.errors import register_exception_handlers
from src.api.routes import books_router, health_router
from src.config import get_settings
from src.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(debug=settings.debug)
    logger.info("Server is listening", host=settings.host, port=settings.port)
    yield


app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url=settings.docs_url,
    redoc_url="/redoc",
    openapi_url=f"{settings.docs_url}/openapi.json",
)
app.openapi_version = "3.0.3"

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, endpoint="/metrics")

register_exception_handlers(app)

# Include routers
app.include_router(health_router)
app.include_router(books_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Service information endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": settings.docs_url,
        "openapi": app.openapi_url,
        "health": "/health",
        "books": f"{settings.api_prefix}/books",
    }


def run() -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )


if __name__ == "__main__":
    run()
