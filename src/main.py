"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.routes import books_router, health_router
from src.config import get_settings
from src.core.books import get_book_store, seed_sample_books
from src.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(debug=settings.debug)
    if settings.seed_samples:
        seed_sample_books(get_book_store())
    logger.info("Book exchange started", storage_backend=settings.storage_backend)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Book exchange catalog with JSON backup import and export",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

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

# Include routers
app.include_router(health_router)
app.include_router(books_router)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
        "health": "/health",
        "books": "/v1/books",
        "stats": "/v1/books/stats",
        "export": "/v1/books/export",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
