"""Request logging middleware."""

import time
from typing import Any, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.utils.logging import RequestLogger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its status and duration."""

    def __init__(self, app: Any) -> None:
        """Initialize request logging middleware."""
        super().__init__(app)
        self.request_logger = RequestLogger()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Log the request, then the response once it is produced."""
        request_data = self.request_logger.log_request(request)
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            self.request_logger.log_failure(
                request_data, e, time.perf_counter() - start
            )
            raise

        self.request_logger.log_response(
            request_data, response, time.perf_counter() - start
        )
        return response
