# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.api.reviews import router as reviews_router
from app.config import Settings, get_settings
from app.db.engine import build_engine
from app.db.schema import metadata
from app.error_handlers import register_error_handlers
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    metadata.create_all(engine)
    logger.info("Book reviews store ready at %s", engine.url)
    try:
        yield
    finally:
        engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around an explicit Settings object (defaults to the
    environment-derived one).
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    register_error_handlers(app)
    app.include_router(reviews_router)

    return app


app = create_app()
