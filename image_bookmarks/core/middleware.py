"""Custom middleware for request processing."""

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from image_bookmarks.core.exceptions import generic_exception_handler
from image_bookmarks.utils.logging import get_logger, request_id_var

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and request ID injection.

    Adds a unique request ID to each request, exposes it to log records via
    a context variable and logs request/response details. Unhandled errors
    are turned into the 500 response here so it carries the same headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process the request and add logging."""
        # Reuse an upstream request ID if a proxy supplied one
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # Traceback is logged by the generic exception handler
                logger.error(
                    "Request failed",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error": str(exc),
                        "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    },
                )
                response = await generic_exception_handler(request, exc)

            process_time = (time.perf_counter() - start_time) * 1000  # ms

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time-Ms"] = f"{process_time:.2f}"

            logger.info(
                "Request completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "process_time_ms": round(process_time, 2),
                    "client_ip": request.client.host if request.client else None,
                },
            )
            return response
        finally:
            request_id_var.reset(token)
