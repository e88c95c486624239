"""
HTTP server for presenting a deck in the browser.

Routes:
  GET /            - the deck
  GET /p           - redirect to the presenter view
  GET /presenter   - presenter view (current slide, next slide, notes)
  GET /images/...  - image assets from the section directories
  GET /archive     - zip download of the deck and its images
  GET /shjs/...    - syntax highlighter assets, when configured

Every request rebuilds the deck from disk.
"""

import logging
import mimetypes

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles

from . import __version__
from .archive import build_archive, content_disposition
from .config import DeckConfig
from .errors import DeckError
from .generator import DeckGenerator, render_presenter

logger = logging.getLogger(__name__)


def create_app(config: DeckConfig) -> FastAPI:
    """Build the FastAPI application serving the deck under ``config.slides_root``."""
    app = FastAPI(
        title="showdeck",
        description="Markdown slide decks in the browser",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )
    generator = DeckGenerator(config)
    app.state.config = config
    app.state.generator = generator

    @app.exception_handler(DeckError)
    async def deck_error_handler(request: Request, exc: DeckError):
        logger.error(f"Error rendering slides for {request.url.path}: {exc}")
        return PlainTextResponse(f"Error rendering slides: {exc}", status_code=500)

    @app.get("/", response_class=HTMLResponse)
    def slides():
        return HTMLResponse(generator.render_html())

    @app.get("/p")
    def presenter_redirect():
        return RedirectResponse("/presenter/#/", status_code=302)

    @app.get("/presenter", response_class=HTMLResponse)
    @app.get("/presenter/", response_class=HTMLResponse)
    def presenter():
        return HTMLResponse(render_presenter())

    @app.get("/images/{image_path:path}")
    def images(image_path: str):
        deck = generator.load()
        basename = image_path.strip("/").rsplit("/", 1)[-1]
        fullpath = deck.images.get(basename)
        if not fullpath:
            raise HTTPException(status_code=404, detail=f"No image named {basename}")
        try:
            with open(fullpath, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        if basename.endswith(".svg"):
            media_type = "image/svg+xml"
        else:
            media_type = mimetypes.guess_type(basename)[0] or "application/octet-stream"
        return Response(content=data, media_type=media_type)

    @app.get("/archive")
    @app.get("/archive/")
    def archive():
        deck = generator.load()
        return Response(
            content=build_archive(generator, deck),
            media_type="application/zip",
            headers={"Content-Disposition": content_disposition(deck)},
        )

    if config.shjs_dir is not None:
        app.mount("/shjs", StaticFiles(directory=str(config.shjs_dir)), name="shjs")

    return app


def serve(config: DeckConfig) -> None:
    """Run the deck server until interrupted."""
    import uvicorn

    app = create_app(config)
    base = f"http://{config.host}:{config.port}"
    logger.info(f"Starting webserver on {base}")
    logger.info(f"Presenter display on {base}/p")
    logger.info(f"Archive available from {base}/archive")
    uvicorn.run(app, host=config.host, port=config.port, log_level="debug" if config.debug else "info")
