"""Landing page and API info.

GET /     - HTML landing page
GET /api  - Greeting, service version and API version as JSON
"""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from postboard.routes.deps import get_app_settings
from postboard.services.greeting import greet
from postboard.settings import Settings

router = APIRouter()

GREETING_NAME = "World"

_ROUTES = (
    ("GET", "/api/users", "List users (page, pageSize)"),
    ("GET", "/api/users/{id}", "Get a user"),
    ("POST", "/api/users", "Create a user"),
    ("GET", "/api/posts", "List posts (page, pageSize)"),
    ("GET", "/api/posts/{id}", "Get a post"),
    ("POST", "/api/posts", "Create a post"),
    ("GET", "/health", "Health check"),
)


def render_landing_page(settings: Settings) -> str:
    """Render the static landing document."""
    rows = "\n".join(
        f"        <li><code>{method} {escape(path)}</code> {escape(summary)}</li>"
        for method, path, summary in _ROUTES
    )
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>{escape(settings.app_name)}</title>
  </head>
  <body>
    <h1>{escape(greet(GREETING_NAME))}</h1>
    <p>{escape(settings.app_name)} {escape(settings.app_version)} (API {escape(settings.api_version)})</p>
    <ul>
{rows}
    </ul>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page(settings: Settings = Depends(get_app_settings)) -> str:
    return render_landing_page(settings)


@router.get("/api")
async def api_info(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """Greeting plus version info."""
    return {
        "message": greet(GREETING_NAME),
        "version": settings.app_version,
        "apiVersion": settings.api_version,
    }
