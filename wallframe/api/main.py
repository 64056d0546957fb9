"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallframe import __version__
from wallframe.api.routes import router
from wallframe.core.errors import FramingError
from wallframe.logging_config import setup_logging
from wallframe.settings import Settings

logger = logging.getLogger(__name__)


async def framing_error_handler(request: Request, exc: FramingError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Wall Framing Engine",
        description="Residential wall framing layout generator",
        version=__version__,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FramingError, framing_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
