from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from apidocs.api.observability.metrics import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION_SECONDS,
    normalize_path,
)
from apidocs.core.observability.metrics import inc_http

log = logging.getLogger("apidocs.request")

REQUEST_ID_HEADER = "X-Request-Id"


def _json_log(event: str, **fields):
    # Structured log in a single line.
    msg = {"event": event, **fields}
    log.info("%s", msg)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Request ID + request metrics + one structured log line per request.

    Adds:
      request.state.request_id
      response header: X-Request-Id
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = rid

        start = time.perf_counter()
        resp = await call_next(request)
        dur_s = time.perf_counter() - start

        resp.headers[REQUEST_ID_HEADER] = rid

        # Prometheus metrics (low-cardinality path)
        p = normalize_path(request.url.path)
        m = request.method.upper()
        s = resp.status_code
        HTTP_REQUESTS_TOTAL.labels(method=m, path=p, status=str(s)).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=m, path=p).observe(dur_s)
        inc_http(m, p, s)

        _json_log(
            "request",
            request_id=rid,
            method=request.method,
            path=request.url.path,
            status_code=s,
            duration_ms=int(dur_s * 1000),
        )
        return resp


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Security headers (enabled in prod by default).

    No Content-Security-Policy: the viewer page pulls its assets from a CDN.
    """

    def __init__(self, app, enabled: bool = True):
        super().__init__(app)
        self.enabled = enabled

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        resp = await call_next(request)
        if not self.enabled:
            return resp

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp
