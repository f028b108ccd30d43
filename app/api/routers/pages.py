import html
import math
from pathlib import Path

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, HTMLResponse


VIEWS_DIR = Path(__file__).resolve().parents[2] / "views"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index_page() -> FileResponse:
    return FileResponse(VIEWS_DIR / "index.html")


@router.get("/about", include_in_schema=False)
async def about_page() -> FileResponse:
    return FileResponse(VIEWS_DIR / "about.html")


@router.get("/contact", include_in_schema=False)
async def contact_page() -> FileResponse:
    return FileResponse(VIEWS_DIR / "contact.html")


def _is_number(value: str) -> bool:
    try:
        return not math.isnan(float(value))
    except ValueError:
        return False


@router.get("/item/{item_id}", response_class=HTMLResponse, include_in_schema=False)
async def item_page(item_id: str):
    if not _is_number(item_id):
        return HTMLResponse(
            "<h1>400 Bad Request</h1><p>Item ID must be a number.</p>",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return HTMLResponse(f'<h1>Item ID: {html.escape(item_id)}</h1><a href="/">Back</a>')
