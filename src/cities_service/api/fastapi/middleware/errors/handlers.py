from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cities_service.exceptions import CitiesServiceError, StoreError

logger = logging.getLogger(__name__)


def message_response(message: str, status: int = 500) -> JSONResponse:
    """The only error shape this service emits: `{"message": "..."}`."""
    return JSONResponse(status_code=status, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CitiesServiceError)
    async def _handle_service_error(request: Request, exc: CitiesServiceError):
        store = exc.store if isinstance(exc, StoreError) else None
        logger.error(
            "%s on %s %s (500): %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc,
            extra={"store": store, "http_method": request.method, "path": request.url.path},
        )
        return message_response(str(exc))
