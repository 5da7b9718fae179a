from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

from movie_reviews.config import Settings, get_settings
from movie_reviews.database import Database, StoreError
from movie_reviews.middleware import CORSHeadersMiddleware, apply_cors_headers
from movie_reviews.middleware.cors import ALLOWED_HEADERS, ALLOWED_METHODS
from movie_reviews.routes import movies, reviews

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the API.

    Args:
        settings: Configuration, read from the environment when omitted
        database: Pre-built Database; when omitted one is created at startup
            from settings and disposed at shutdown
    """
    settings = settings or get_settings()

    # ============================================
    # Application Lifespan Management
    # ============================================

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup: open the connection pool
        Shutdown: release it (only if this app created it)
        """
        logger.info("=" * 60)
        logger.info("Movie Reviews API starting...")
        owns_database = database is None
        app.state.db = Database.from_settings(settings) if owns_database else database
        logger.info(f"   Database dialect: {app.state.db.dialect_name}")
        logger.info(f"   Listening port: {settings.port}")
        logger.info("=" * 60)

        yield

        logger.info("=" * 60)
        logger.info("Movie Reviews API shutting down...")
        if owns_database:
            app.state.db.dispose()
        logger.info("=" * 60)

    app = FastAPI(
        title="Movie Reviews API",
        description="Movie catalog with user reviews",
        version="1.0.0",
        lifespan=lifespan
    )

    # ============================================
    # CORS - any origin may read and post
    # ============================================

    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    # ============================================
    # Exception Handlers - plain text bodies
    # ============================================

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid request on {request.url.path}: {exc.errors()}")
        return PlainTextResponse("Invalid request body", status_code=400)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(
            f"Database error on {request.method} {request.url.path}: {exc.original}",
            exc_info=exc.original,
        )
        return PlainTextResponse("Server error", status_code=500)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Catch-all handler. Runs outside the middleware stack, so CORS
        headers are set here directly.
        """
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        response = PlainTextResponse("Internal server error", status_code=500)
        return apply_cors_headers(response)

    # ============================================
    # Routes
    # ============================================

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    def root():
        """Greeting"""
        return "Application connected to the database!"

    app.include_router(movies.router)
    app.include_router(reviews.router)

    return app


_settings = get_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=_settings.port,
        log_level="info"
    )
