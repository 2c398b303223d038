from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from inkwell.assets import get_posts_store, get_public_store
from inkwell.config import TEMPLATES_DIR, load_site_settings
from inkwell.exceptions import AssetNotFound, UnsupportedContentType
from inkwell.services import highlighter, posts as post_service
from inkwell.services.asset_store import AssetStore, resolve_content_type


HIGHLIGHT_STYLESHEET = "highlight.css"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["site"] = load_site_settings()


def get_now() -> datetime:
    """Current time for page assembly; overridden in tests."""
    return datetime.now()


def current_year(now: datetime) -> str:
    return f"{now.year:04d}"


@router.get("/", response_class=HTMLResponse, name="homepage")
def homepage(request: Request, now: datetime = Depends(get_now)) -> HTMLResponse:
    return templates.TemplateResponse(request, "index/index.html", {"year": current_year(now)})


@router.get("/blog", response_class=HTMLResponse, name="blog_index")
def blog_index(
    request: Request,
    now: datetime = Depends(get_now),
    store: AssetStore = Depends(get_posts_store),
) -> HTMLResponse:
    posts = post_service.list_posts(store)
    return templates.TemplateResponse(
        request,
        "blog/index.html",
        {"year": current_year(now), "posts": posts},
    )


@router.get("/blog/{slug}", response_class=HTMLResponse, name="post_detail")
def post_detail(
    request: Request,
    slug: str,
    now: datetime = Depends(get_now),
    store: AssetStore = Depends(get_posts_store),
) -> HTMLResponse:
    try:
        post_html = post_service.load_post_html(store, slug)
    except AssetNotFound:
        raise HTTPException(status_code=404, detail="Post not found")

    return templates.TemplateResponse(
        request,
        "blog/post.html",
        {"year": current_year(now), "post": post_html},
    )


@router.get("/static/{path:path}", name="static")
def static_asset(path: str, store: AssetStore = Depends(get_public_store)) -> Response:
    data = store.get(path)
    if data is None:
        if path == HIGHLIGHT_STYLESHEET:
            return Response(content=highlighter.stylesheet(), media_type="text/css")
        raise HTTPException(status_code=404, detail="Asset not found")

    try:
        content_type = resolve_content_type(path)
    except UnsupportedContentType as exc:
        raise HTTPException(status_code=400, detail=exc.reason)

    return Response(content=data, media_type=content_type)
