from importlib.resources import files

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    page = files("movie_portal").joinpath("static/index.html").read_text(encoding="utf-8")
    return HTMLResponse(page)
