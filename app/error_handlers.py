# app/error_handlers.py
"""
Translate framework-level failures into the API's status codes.

- A path segment that is not an integer id behaves like an unknown route (404).
- A body that cannot be parsed into a review is a bad request (400).
- Anything unhandled is logged and reported as a bare 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()

        if any(error.get("loc", ())[:1] == ("path",) for error in errors):
            return JSONResponse(status_code=404, content={"detail": "Not Found"})

        logger.info("Malformed request to %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_encoder(errors)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error"},
        )
