"""Documentation page: a fixed HTML shell around the CDN-hosted ReDoc viewer."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

REDOC_CSS_URL = "https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css"
REDOC_JS_URL = "https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js"
SPEC_URL = "/api-docs"

DOCS_PAGE_HTML = f"""\
<!DOCTYPE html>
<html>
<head>
    <title>API Documentation</title>
    <link rel="stylesheet" href="{REDOC_CSS_URL}">
</head>
<body>
    <redoc spec-url="{SPEC_URL}"></redoc>
    <script src="{REDOC_JS_URL}"></script>
</body>
</html>
"""

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def docs_page() -> HTMLResponse:
    return HTMLResponse(DOCS_PAGE_HTML)
