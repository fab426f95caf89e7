from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from apidocs.core.observability.metrics import inc_named

log = logging.getLogger("apidocs.errors")


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Outermost wrapper. Anything that escapes a handler or an inner
    middleware becomes a plain 500 JSON body; the traceback stays in the
    server log, keyed by request id.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            rid = _request_id(request)
            log.exception("Unhandled error rid=%s method=%s path=%s", rid, request.method, request.url.path)
            inc_named("unhandled_errors")

            payload = {"detail": "Internal Server Error"}
            if rid:
                payload["request_id"] = rid
            return JSONResponse(status_code=500, content=payload)
