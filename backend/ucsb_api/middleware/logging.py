"""
UCSB Resources API — Access Log Middleware
===========================================

What:  One access-log line per HTTP request, on the `ucsb_api.access` logger.
How:   Times the downstream app and logs `[rid] METHOD path -> status (ms)`.
       Level follows the status class: 5xx ERROR, 403/404 INFO (normal
       traffic for a role-guarded API), other 4xx WARNING, else INFO.

Not logged: query strings (they carry reviewer and requester emails),
bodies, and the Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ucsb_api.middleware.request_id import request_id_var

logger = logging.getLogger("ucsb_api.access")

QUIET_STATUSES = {403, 404}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400 and status not in QUIET_STATUSES:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log; health probes are skipped."""

    skip_paths = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.skip_paths:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.log(
            level_for_status(response.status_code),
            "[%s] %s %s -> %d (%.1fms) client=%s",
            request_id_var.get(""),
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            request.client.host if request.client else "-",
        )
        return response
