"""
FastAPI application for the kiosk front end.

Routes:
  - ``GET /weather_data``  aggregated weather + meal document (cached)
  - ``GET /image_list``    slideshow photos in display order
  - ``GET /health``        liveness
  - ``/photos/*``          photo files
  - ``/``                  front-end bundle (``index.html`` and assets)

Run with ``kiosk-board serve`` or
``uvicorn --factory kiosk_board.app:create_app``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from kiosk_board import __version__
from kiosk_board.aggregator import Aggregator
from kiosk_board.config import Settings, get_settings
from kiosk_board.images import PHOTOS_URL_PREFIX, list_images
from kiosk_board.schemas import AggregatedResponse, ImageEntry
from kiosk_board.store import ResultStore

logger = logging.getLogger(__name__)

PHOTOS_READ_ERROR = "사진 폴더를 읽지 못했습니다."


def create_app(
    settings: Settings | None = None,
    aggregator: Aggregator | None = None,
) -> FastAPI:
    """
    Build the app with one shared result store.

    Args:
        settings: Settings to use (defaults to ``get_settings()``).
        aggregator: Pre-built aggregator, e.g. with a fake clock in tests.
    """
    settings = settings or get_settings()
    aggregator = aggregator or Aggregator(ResultStore(), settings)

    app = FastAPI(title=settings.app_name, version=__version__)

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.app_env}

    @app.get("/weather_data", response_model=AggregatedResponse)
    def weather_data() -> AggregatedResponse:
        return aggregator.get_aggregated_weather_and_meal()

    @app.get("/image_list", response_model=list[ImageEntry])
    def image_list() -> list[ImageEntry] | JSONResponse:
        try:
            return list_images(settings.photos_dir)
        except OSError:
            logger.exception("Failed to read photos directory %s", settings.photos_dir)
            return JSONResponse(status_code=500, content={"error": PHOTOS_READ_ERROR})

    if settings.photos_dir.is_dir():
        app.mount(
            PHOTOS_URL_PREFIX,
            StaticFiles(directory=settings.photos_dir),
            name="photos",
        )
    else:
        logger.warning("Photos directory %s not found; /photos disabled", settings.photos_dir)

    # Mounted last so the API routes above take precedence.
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.warning("Public directory %s not found; front end disabled", settings.public_dir)

    return app
