"""Client assets: pyview's browser script and the page stylesheet."""

import logging
from pathlib import Path
from typing import Any

from markupsafe import Markup
from starlette.responses import FileResponse, Response

logger = logging.getLogger(__name__)

CLIENT_JS_ROUTE = "/static/assets/app.js"

PAGE_STYLE = Markup(
    """<style>
  .route-browser { padding: 10px; font-family: sans-serif; }
  .header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 8px; }
  .app-title { font-size: 32px; margin: 0; }
  .detail-title { font-size: 24px; margin: 0; }
  .language-switcher { display: flex; flex-direction: column; align-items: flex-end; }
  .search-bar { width: 100%; height: 36px; border: 1px solid gray; margin-bottom: 8px; padding: 0 8px; }
  .routes, .stops { list-style: none; margin: 0; padding: 0; }
  .route-box, .stop-box { border: 1px solid; margin: 1px 0; }
  .bus-detail { display: flex; width: 100%; padding: 4px 0; border: 0; background: none; text-align: left; }
  .title { font-size: 32px; padding: 4px 8px; }
  .item { font-size: 24px; padding: 4px 5px; }
  .to { font-size: 16px; }
  .from { font-size: 14px; }
  .stop-box { display: flex; padding: 4px 0; }
  .detail-number { font-size: 32px; padding: 4px 8px; }
  .detail-item { font-size: 24px; padding: 5px; }
</style>"""
)


def client_js_path() -> Path | None:
    """Locate pyview's client JavaScript inside the installed package."""
    import pyview

    pyview_path = Path(pyview.__file__).parent
    for candidate in (
        pyview_path / "static" / "assets" / "app.js",
        pyview_path / "assets" / "js" / "app.js",
    ):
        if candidate.exists():
            return candidate
    return None


async def serve_client_js(_request: Any) -> Response:
    """Serve pyview's client JavaScript."""
    path = client_js_path()
    if path is None:
        logger.error("Could not find pyview client JS in the installed pyview package")
        return Response(
            content="// PyView client not found",
            media_type="application/javascript",
            status_code=404,
        )
    response = FileResponse(str(path), media_type="application/javascript")
    response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
    return response
