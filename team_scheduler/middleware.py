# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware: request ID propagation, access logging and
Prometheus metrics.
"""

import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

logger = get_logger(__name__)

# User ids and override dates become placeholders so label cardinality stays flat.
_ID_SEGMENT = re.compile(r"^\d+$")
_DATE_SEGMENT = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SKIP_PATHS: tuple[str, ...] = (
    "/api/health", "/api/health/ready", "/metrics",
    "/openapi.json", "/docs", "/redoc",
)


def normalize_path(path: str) -> str:
    """/api/users/7/temporary-availability/2026-10-19 -> /api/users/{id}/temporary-availability/{date}"""
    segments = []
    for segment in path.split("/"):
        if _ID_SEGMENT.match(segment):
            segments.append("{id}")
        elif _DATE_SEGMENT.match(segment):
            segments.append("{date}")
        else:
            segments.append(segment)
    return "/".join(segments)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID and write one access log line per request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "%s %s -> %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency, and error rate via Prometheus."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        path = request.url.path
        if path in SKIP_PATHS:
            return response

        endpoint = normalize_path(path)
        status = str(response.status_code)
        REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(duration)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(method=request.method, endpoint=endpoint, status=status).inc()
        return response
