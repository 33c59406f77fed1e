"""wakeonlan FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from wakeonlan import __version__
from wakeonlan.config import settings
from wakeonlan.utils.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    setup_logging(settings.log_level)
    logger.info(
        "wakeonlan v%s started, listening on %s:%s (mode: %s)",
        __version__, settings.host, settings.port, settings.mode,
    )
    try:
        yield
    finally:
        logger.info("wakeonlan shutting down")


def create_app() -> FastAPI:
    from wakeonlan.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=_lifespan,
    )
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "wakeonlan.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
