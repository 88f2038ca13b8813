"""Catalog exceptions and the handlers that render them as the standard error body."""
import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(CatalogError):
    """Malformed input or a failed referential check at write time."""
    status_code = 400


class ResourceNotFoundError(CatalogError):
    status_code = 404


class DuplicateResourceError(CatalogError):
    status_code = 409


class SeedDataError(CatalogError):
    """Seed fixture or image asset is missing or unreadable."""
    status_code = 500


def error_body(
    status_code: int,
    message: str,
    path: str,
    validation_errors: Optional[List[dict]] = None,
) -> dict:
    body: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
    }
    if validation_errors is not None:
        body["validationErrors"] = validation_errors
    return body


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "request"


def _clean_message(message: str) -> str:
    return message.removeprefix("Value error, ")


async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.message, request.url.path),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    violations = [
        {"field": _field_name(err.get("loc", ())), "message": _clean_message(err.get("msg", "Invalid value"))}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=error_body(400, "Validation failed", request.url.path, violations),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity violation on %s: %s", request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content=error_body(409, "Operation conflicts with existing data", request.url.path),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, str(exc.detail), request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body(500, "An unexpected error occurred", request.url.path),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
