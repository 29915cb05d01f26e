"""Global exception handlers mapping core errors onto HTTP responses."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notebook_api.api.v1.schemas.error import ErrorResponse
from notebook_api.core.exceptions import NoteNotFoundError, NoteStoreError, NoteValidationError
from notebook_api.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger(__name__)


def _error(status_code: int, message: str, details: Any = None) -> JSONResponse:
    body = ErrorResponse(message=message, details=details, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NoteNotFoundError)
    async def _not_found_handler(request: Request, exc: NoteNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, "Note Not Found", str(exc))

    @app.exception_handler(NoteValidationError)
    async def _note_validation_handler(request: Request, exc: NoteValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, "Validation Failed", str(exc))

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation Failed", errors)

    @app.exception_handler(NoteStoreError)
    async def _store_handler(request: Request, exc: NoteStoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Store Unavailable", str(exc))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "An unexpected error occurred")
