"""Logging configuration for the Ethiopian Date Service."""

import logging
import sys
from typing import Any, Dict

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from src.config import get_settings


def setup_logging() -> None:
    """Configure structured logging for the application."""
    settings = get_settings()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            render_processor(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def render_processor() -> Any:
    """Choose renderer based on configuration."""
    settings = get_settings()

    if settings.log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        return structlog.dev.ConsoleRenderer()


def get_logger(name: str) -> BoundLogger:
    """Get a configured logger instance."""
    bound_logger: BoundLogger = structlog.get_logger(name)
    return bound_logger


class RequestLogger:
    """Logs HTTP requests and their responses."""

    def __init__(self) -> None:
        """Initialize request logger."""
        self.logger = get_logger(__name__)

    def log_request(self, request: Any) -> Dict[str, Any]:
        """Log incoming request details."""
        request_data = {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_host": request.client.host if request.client else None,
        }

        self.logger.debug("request_received", **request_data)
        return request_data

    def log_response(
        self, request_data: Dict[str, Any], response: Any, duration: float
    ) -> None:
        """Log response details."""
        response_data = {
            **request_data,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }

        if response.status_code >= 500:
            self.logger.error("request_failed", **response_data)
        elif response.status_code >= 400:
            self.logger.warning("request_rejected", **response_data)
        else:
            self.logger.info("request_completed", **response_data)

    def log_failure(
        self, request_data: Dict[str, Any], error: BaseException, duration: float
    ) -> None:
        """Log a request whose handler raised before producing a response."""
        self.logger.error(
            "request_failed",
            **request_data,
            status_code=500,
            error=repr(error),
            duration_ms=round(duration * 1000, 2),
        )
