"""FastAPI application main entry point."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from apps.api.v1.endpoints import orders
from core.infrastructure.database import (
    close_database,
    get_session_factory,
    init_database,
    seed_orders,
)
from core.infrastructure.logging import configure_logging, get_logger
from core.settings import get_app_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed on startup, release connections on shutdown."""
    settings = get_app_settings()

    logger.info(f"🚀 {settings.title} starting up ({settings.environment})...")
    await init_database()

    if settings.seed_on_startup:
        await seed_orders(get_session_factory())

    if settings.is_development:
        logger.info("📚 Swagger UI available at: /docs")

    yield

    await close_database()
    logger.info(f"👋 {settings.title} shutting down...")


def create_app() -> FastAPI:
    """Build the FastAPI application.

    Interactive docs are served only in the development environment.

    Returns:
        Configured FastAPI instance
    """
    settings = get_app_settings()
    configure_logging(settings.log_level)

    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.title,
        description="Order reads through a session and through a generic repository",
        version=settings.version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        logger.info(f"→ {request.method} {request.url.path}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"← {request.method} {request.url.path} "
            f"[{response.status_code}] ({duration:.3f}s)"
        )
        return response

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle uncaught exceptions.

        Args:
            request: FastAPI request
            exc: Exception

        Returns:
            JSONResponse with a generic error body
        """
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            Health status
        """
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root() -> dict[str, str]:
        """API root endpoint."""
        return {"message": settings.title, "version": settings.version}

    app.include_router(orders.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
