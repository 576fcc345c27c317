"""HTTP API entry point.

FastAPI application factory with routers, request logging and error
handlers.
"""

import sys
import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import NoReturn

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from parabfs.common.config import get_settings
from parabfs.common.exceptions import ParaBFSError
from parabfs.common.logging import bind_context, clear_context, get_logger, setup_logging
from parabfs.common.metrics import API_REQUEST_DURATION, API_REQUESTS, set_app_info

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()

    setup_logging(settings.logging)

    set_app_info(
        version=settings.app_version,
        environment=settings.environment,
    )

    logger.info(
        "Starting ParaBFS API",
        version=settings.app_version,
        environment=settings.environment,
        worker_count=settings.traversal.worker_count,
    )

    yield

    logger.info("Shutting down ParaBFS API")


def create_app() -> FastAPI:
    """Create FastAPI application instance."""
    settings = get_settings()

    app = FastAPI(
        title="ParaBFS API",
        description="Concurrent all-vertices breadth-first traversal",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        bind_context(request_id=request_id)

        start = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start

            API_REQUESTS.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code,
            ).inc()
            API_REQUEST_DURATION.labels(
                method=request.method,
                endpoint=request.url.path,
            ).observe(duration)

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )

            return response

        except Exception as e:
            duration = time.perf_counter() - start
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round(duration * 1000, 2),
            )
            raise
        finally:
            clear_context()

    # Exception handlers
    @app.exception_handler(ParaBFSError)
    async def parabfs_exception_handler(
        request: Request,
        exc: ParaBFSError,
    ) -> JSONResponse:
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(
            "Validation error",
            errors=exc.errors(),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": jsonable_errors(exc),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unhandled error",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An internal error occurred",
            },
        )

    from parabfs.api.routers import admin, graphs, traversals

    app.include_router(admin.router)
    app.include_router(traversals.router, prefix="/api/v1")
    app.include_router(graphs.router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        return {
            "name": "ParaBFS API",
            "version": settings.app_version,
            "docs": "/docs" if not settings.is_production else None,
        }

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the non-serializable ``ctx`` entries."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


# Create app instance for uvicorn
app = create_app()


def run() -> NoReturn:
    """Run the API server."""
    import uvicorn

    settings = get_settings()

    try:
        uvicorn.run(
            "parabfs.api.main:app",
            host=settings.api.host,
            port=settings.api.port,
            workers=settings.api.workers if not settings.api.reload else 1,
            reload=settings.api.reload,
            log_level="info",
            access_log=False,  # We use our own logging
        )
        sys.exit(0)
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        logger.error("API failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
