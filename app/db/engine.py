# app/db/engine.py

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.config import Settings


def _is_memory_sqlite(url) -> bool:
    database = url.database or ""
    return database in ("", ":memory:") or url.query.get("mode") == "memory"


def build_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    options = {}

    if url.get_backend_name() == "sqlite":
        # FastAPI runs sync handlers in a threadpool
        options["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            # one shared connection, otherwise each thread sees its own empty database
            options["poolclass"] = StaticPool

    return create_engine(
        settings.database_url,
        echo=settings.sql_echo,
        future=True,
        **options,
    )


def get_engine(request: Request) -> Engine:
    """
    Request dependency returning the engine built at app startup.
    """
    return request.app.state.engine
