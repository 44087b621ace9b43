"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf import __version__
from bookshelf.config import Settings, get_settings
from bookshelf.core.exceptions import AppException
from bookshelf.core.logging import get_logger, setup_logging
from bookshelf.registry import BookRegistry
from bookshelf.routers import books, demo

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    count = await app.state.registry.count()
    logger.info(f"Book registry ready with {count} book(s)")
    yield
    logger.info("Shutting down")


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[BookRegistry] = None,
) -> FastAPI:
    """
    Build the application and the registry it owns.

    A registry may be passed in to share state with the caller (tests do this).
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if registry is None:
        registry = BookRegistry.seeded() if settings.seed_books else BookRegistry()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book registry",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.registry = registry
    app.state.settings = settings

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        if exc.status_code >= 500 and not settings.debug:
            return PlainTextResponse("Internal Server Error", status_code=exc.status_code)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.message,
                "error_code": exc.error_code,
                "details": exc.details,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions, answering unknown routes with plain text."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            uri = request.url.path
            if request.url.query:
                uri = f"{uri}?{request.url.query}"
            return PlainTextResponse(f"No route {uri}", status_code=exc.status_code)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return PlainTextResponse(
                "",
                status_code=exc.status_code,
                headers=getattr(exc, "headers", None),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                },
            )
        return PlainTextResponse("Internal Server Error", status_code=500)

    app.include_router(books.router)
    app.include_router(demo.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
