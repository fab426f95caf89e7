from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from apidocs.api.endpoints.docs_page import SPEC_URL
from apidocs.api.observability.metrics import SPEC_REQUESTS_TOTAL
from apidocs.core.observability.metrics import inc_named
from apidocs.core.spec_file import is_servable, media_type_for

log = logging.getLogger("apidocs.spec")

router = APIRouter()


@router.api_route(SPEC_URL, methods=["GET", "HEAD"], include_in_schema=False)
@router.api_route(SPEC_URL + "/", methods=["GET", "HEAD"], include_in_schema=False)
def spec_file(request: Request) -> FileResponse:
    """
    Stream the configured spec file. The path is resolved per request; the
    file belongs to an external authoring step and may change or vanish.
    """
    path = request.app.state.settings.spec_file

    if not is_servable(path):
        log.warning("Spec file not found: %s", path)
        SPEC_REQUESTS_TOTAL.labels(outcome="missing").inc()
        inc_named("spec_missing")
        raise HTTPException(status_code=404)

    SPEC_REQUESTS_TOTAL.labels(outcome="served").inc()
    inc_named("spec_served")
    return FileResponse(path, media_type=media_type_for(path))
