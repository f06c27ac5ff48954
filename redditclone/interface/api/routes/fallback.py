"""Catch-all route for paths no other route serves.

Unknown /api/ paths answer an empty JSON list, anything else gets the
single page application's index.html. /static/ is served by the static
files mount before this route is reached.
"""

from pathlib import Path

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.responses import Response

from redditclone.config import Settings

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
EMPTY_PREFIX = "/api/"

router = APIRouter(route_class=DishkaRoute)


@router.api_route(
    "/{full_path:path}", methods=FALLBACK_METHODS, include_in_schema=False
)
async def fallback(full_path: str, settings: FromDishka[Settings]) -> Response:
    path = "/" + full_path
    if path.startswith(EMPTY_PREFIX):
        return JSONResponse([])

    index = Path(settings.index_html)
    if not index.is_file():
        return PlainTextResponse("404 page not found", status_code=404)
    return FileResponse(index, media_type="text/html")
