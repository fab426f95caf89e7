from __future__ import annotations

from prometheus_client import Counter, Histogram

# Paths with their own label; everything else collapses into one bucket.
KNOWN_PATHS = frozenset(
    {
        "/",
        "/api-docs",
        "/health/live",
        "/health/ready",
        "/metrics",
        "/metrics/snapshot",
    }
)


def normalize_path(path: str) -> str:
    """Reduce high-cardinality paths for metrics labels."""
    p = path or "/"
    if len(p) > 1:
        p = p.rstrip("/")
    return p if p in KNOWN_PATHS else ":other"


HTTP_REQUESTS_TOTAL = Counter(
    "apidocs_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "apidocs_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

SPEC_REQUESTS_TOTAL = Counter(
    "apidocs_spec_requests_total",
    "Spec file requests by outcome",
    ["outcome"],
)
