"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import exercise_router, user_router
from api.error_handlers import register_exception_handlers
from config.settings import settings
from models.store import DocumentStore
from utils.logger import setup_logger

logger = setup_logger(__name__)


def build_store(backend: Optional[str] = None) -> DocumentStore:
    """Create the document store selected by settings.store_backend."""
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        from models.memory_store import MemoryDocumentStore
        return MemoryDocumentStore()
    if backend == "mongo":
        from models.database import MongoDocumentStore
        return MongoDocumentStore()
    raise ValueError(f"Unknown store backend: {backend!r}")


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the application around the given store handle."""
    if store is None:
        store = build_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown events."""
        # Startup
        logger.info("Starting application...")
        await app.state.store.connect()
        logger.info("Application started successfully")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        await app.state.store.close()
        logger.info("Application shut down")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Exercise tracking API: users, exercises and date-filtered logs",
        lifespan=lifespan,
    )
    app.state.store = store

    # Remove duplicates while preserving order
    seen = set()
    unique_origins = []
    for origin in settings.cors_origins:
        if origin not in seen:
            seen.add(origin)
            unique_origins.append(origin)

    logger.info(f"CORS configured with origins: {unique_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=unique_origins,
        allow_credentials="*" not in unique_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log each request with its response status."""
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    register_exception_handlers(app)

    # Include API routes
    app.include_router(user_router.router)
    app.include_router(exercise_router.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
