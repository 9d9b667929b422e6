"""Main FastAPI application for the Ethiopian Date Service.

This module creates and configures the FastAPI application with its
routers, middleware and exception handlers, and runs it under uvicorn.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import calendar_router, health_router
from src.api.exceptions import BaseAPIException
from src.config import get_settings
from src.middleware.request_logging import RequestLoggingMiddleware
from src.utils.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Get settings
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    logger.info(
        "application_started",
        name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    logger.info("application_stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Converts Gregorian dates to the Ethiopian calendar",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
    openapi_url="/api/openapi.json" if settings.debug else None,
    lifespan=lifespan,
)

# Add middleware

app.add_middleware(RequestLoggingMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=3600,  # 1 hour cache for preflight requests
)

# Include routers
app.include_router(health_router)
app.include_router(calendar_router)


@app.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "endpoints": {
            "convert": "/convert?date=yyyy-mm-dd",
            "today": "/today",
            "health": "/health/live",
        },
    }


@app.exception_handler(BaseAPIException)
async def api_exception_handler(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """Render API exceptions as an error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle 404 errors."""
    return JSONResponse(status_code=404, content={"error": "Not Found"})


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle 500 errors."""
    logger.error("internal_server_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def main() -> None:
    """Run the service under uvicorn."""
    import uvicorn

    logger.info("server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(
        "app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


# Export app for uvicorn
if __name__ == "__main__":
    main()
