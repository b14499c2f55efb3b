"""Request logging middleware: request ids and response timing."""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp
from structlog import contextvars as structlog_contextvars

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the log context and logs each completed request."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        """
        Initialize request logging middleware.

        Args:
            app: ASGI application
            slow_request_threshold: Seconds after which a request is logged as slow
        """
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog_contextvars.bind_contextvars(
            request_id=request_id, method=request.method, path=request.url.path
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time
            log = logger.warning if duration > self.slow_request_threshold else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round(duration * 1000),
            )
        finally:
            structlog_contextvars.unbind_contextvars("request_id", "method", "path")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
