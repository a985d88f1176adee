"""
HTML pages: Home and Search, sharing one navigation layout.
"""

from functools import lru_cache
from pathlib import Path
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

TEMPLATES_DIR = Path(__file__).parent / "templates"

router = APIRouter(tags=["Pages"])


@lru_cache(maxsize=None)
def _read_template(name: str) -> str:
    return (TEMPLATES_DIR / name).read_text(encoding="utf-8")


def render_page(title: str, template: str, active: str) -> str:
    """Render ``template`` inside the shared layout."""
    layout = Template(_read_template("layout.html"))
    return layout.substitute(
        title=title,
        content=_read_template(template),
        home_class="active" if active == "home" else "",
        search_class="active" if active == "search" else "",
    )


@router.get("/", response_class=HTMLResponse)
async def home_page():
    """Landing page."""
    return HTMLResponse(render_page("Home", "home.html", "home"))


@router.get("/search", response_class=HTMLResponse)
async def search_page():
    """Search page. Fetches ``/api/books`` once and filters in the browser."""
    return HTMLResponse(render_page("Search", "search.html", "search"))
