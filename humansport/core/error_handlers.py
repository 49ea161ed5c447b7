"""Exception handlers rendering every failure as ``{message, errors?}``."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from humansport.core.validation import FieldError, FieldValidationError, field_errors_from

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
DATABASE_ERROR = "Database error"


def error_body(message: str, errors: Optional[list[Any]] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = errors
    return body


def _split_detail(detail: Any) -> tuple[str, Optional[list[Any]]]:
    """Services raise either a plain message or ``{"message": ..., "errors": [...]}``."""
    if isinstance(detail, dict):
        errors = detail.get("errors")
        return str(detail.get("message") or "Request failed"), errors if isinstance(errors, list) else None
    if isinstance(detail, (list, tuple)):
        return "; ".join(str(item) for item in detail), None
    if not detail:
        return "Request failed", None
    return str(detail), None


def _field_errors_response(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_body(VALIDATION_FAILED, [error.as_dict() for error in errors]),
    )


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message, errors = _split_detail(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message, errors),
            headers=exc.headers,
        )

    # Request models that fail parsing are a client error, reported as 400.
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _field_errors_response(field_errors_from(exc.errors()))

    @app.exception_handler(FieldValidationError)
    async def field_validation_error(request: Request, exc: FieldValidationError) -> JSONResponse:
        return _field_errors_response(exc.errors)

    # Reads run outside the services' commit blocks; get_db rolls the session back.
    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=error_body(DATABASE_ERROR, [str(exc)]))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=error_body("Internal server error"))


__all__ = ["register_exception_handlers", "error_body"]
