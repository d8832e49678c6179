# app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn app:app --reload
or, using the configured host and port:
    python -m app
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
