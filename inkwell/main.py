import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from . import config
from .assets import init_assets
from .exceptions import MalformedContent
from .routers import pages


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    init_assets()
    yield


app = FastAPI(title="Inkwell", lifespan=lifespan)

app.include_router(pages.router)


@app.exception_handler(MalformedContent)
async def malformed_content_handler(request: Request, exc: MalformedContent) -> HTMLResponse:
    logger.error("Malformed content while serving %s: %s", request.url.path, exc, exc_info=exc)
    return pages.templates.TemplateResponse(
        request,
        "error.html",
        {"year": pages.current_year(pages.get_now()), "message": "This page could not be rendered."},
        status_code=500,
    )


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=config.HOST, port=config.parse_port())
