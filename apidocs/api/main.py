from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apidocs.api.endpoints import docs_page, spec_file
from apidocs.api.endpoints import health
from apidocs.api.endpoints import metrics as metrics_ep
from apidocs.api.endpoints import metrics_export
from apidocs.api.middleware.error_shaping import SafeErrorMiddleware
from apidocs.api.middleware.request_context import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
)
from apidocs.core.settings import Settings

log = logging.getLogger("apidocs.app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the ASGI app. Also usable as a uvicorn factory:
    `uvicorn --factory apidocs.api.main:create_app`.
    """
    settings = settings or Settings.from_env()

    # The framework's generated docs are off: the spec on disk is the only
    # documentation served.
    app = FastAPI(
        title="API Documentation",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    # ------------------------------------------------------------
    # Middleware stack (ORDER MATTERS)
    # Starlette reverses add_middleware order: the LAST call = OUTERMOST.
    # Runtime order (outermost -> innermost):
    #   SafeErrorMiddleware -> CORSMiddleware -> SecurityHeaders
    #   -> RequestContext -> handler
    # ------------------------------------------------------------
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, enabled=settings.security_headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
        expose_headers=["Content-Length"],
    )
    app.add_middleware(SafeErrorMiddleware)

    # ------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------
    app.include_router(docs_page.router)
    app.include_router(spec_file.router)
    app.include_router(health.router)
    app.include_router(metrics_ep.router)
    app.include_router(metrics_export.router)

    log.info("Serving spec file %s (env=%s)", settings.spec_file, settings.env)
    return app
