from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..settings import api_title
from ..version import __version__
from .routes_convert import router as convert_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    application = FastAPI(title=api_title(), version=__version__)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(convert_router)

    @application.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    logger.debug("created %s", application.title)
    return application


app = create_app()
