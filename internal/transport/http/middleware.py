"""
HTTP Middleware for Product Registry Service.

Provides request ID propagation, access logging and metrics.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from pkg.logger.logger import get_logger, set_request_id
from .errors import REQUEST_ID_HEADER, error_status
from .metrics import MetricsMiddleware

access_logger = get_logger("internal.transport.http.access")


def _log_access(request: Request, status_code: int, start_time: float) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000
    access_logger.info(
        f"{request.method} {request.url.path} - {status_code}",
        method=request.method,
        path=request.url.path,
        query=request.url.query,
        status_code=status_code,
        duration_ms=round(duration_ms, 2),
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Assign a request ID and write one access log line per request.

    The ID is taken from ``X-Request-ID`` when the client sends one and is
    echoed back on the response. It is also kept on ``request.state`` so the
    catch-all error handler can stamp responses built outside this middleware.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_request_id(request_id)
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # The error response is rendered by the outer catch-all handler
            _log_access(request, error_status(exc), start_time)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        _log_access(request, response.status_code, start_time)

        return response


__all__ = [
    "MetricsMiddleware",
    "RequestContextMiddleware",
    "REQUEST_ID_HEADER",
]
