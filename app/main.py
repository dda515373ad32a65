"""FastAPI application entry point.

Evergreen Nursery API - plant catalog, categories and checkout stock.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.errors import ApiError
from app.routes import api_router
from app.settings import get_settings
from app.stores.mongo import close_mongo, init_mongo, ping_mongo

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup: an unreachable cluster is logged, not fatal; requests then
    # fail individually with 500.
    try:
        await init_mongo()
        await ping_mongo()
    except Exception:
        logger.exception("MongoDB init failed")

    yield

    # Shutdown
    await close_mongo()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Plant nursery catalog API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        """Render handler-raised errors in the catalog's envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_content(expose_details=get_settings().expose_error_details),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler for anything a route did not map."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "statusCode": 500,
                "message": "Internal server error",
                "error": str(exc) if settings.debug else None,
            },
        )

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    async def welcome() -> str:
        """Liveness string."""
        return "Welcome to evergreen nursery server."

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
