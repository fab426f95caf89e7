"""Prometheus metrics scrape endpoint.

Read-only; exposes the default registry, which carries the request and spec
file counters recorded by the middleware and the spec route.
"""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
def prometheus_metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
