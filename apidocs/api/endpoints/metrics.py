from fastapi import APIRouter

from apidocs.core.observability.metrics import snapshot_named, snapshot_requests

router = APIRouter()

_TOP_LEVEL_TOTALS = ("requests_total", "requests_GET", "requests_HEAD")


def _render():
    req = snapshot_requests()
    named = snapshot_named()

    body = {"requests": req, **named}
    body.update({k: req[k] for k in _TOP_LEVEL_TOTALS if k in req})
    body["spec"] = {
        "served": named.get("spec_served", 0),
        "missing": named.get("spec_missing", 0),
    }
    return body


@router.get("/metrics/snapshot", include_in_schema=False)
def metrics_snapshot():
    return _render()
