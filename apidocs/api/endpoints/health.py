from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from apidocs.core.observability.metrics import inc_named
from apidocs.core.spec_file import inspect_spec_file

router = APIRouter()


@router.get("/health/live", include_in_schema=False)
def live():
    inc_named("health_live")
    return {"status": "ok"}


@router.get("/health/ready", include_in_schema=False)
def ready(request: Request):
    """
    Readiness reflects ability to serve the spec: the file must exist, parse
    as YAML and declare an OpenAPI/Swagger version.
    """
    inc_named("health_ready")

    status = inspect_spec_file(request.app.state.settings.spec_file)
    if not status.ok:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": status.problems},
        )

    return {"status": "ready", "spec": status.to_dict()}
