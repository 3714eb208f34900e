"""API 오류 분류와 공통 오류 응답(`{"error": {...}}`) 변환 핸들러입니다."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


class AppError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(self, message: str | None = None, code: str | None = None, details: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        if code:
            self.code = code
        self.details = details


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Validation failed"


class AuthError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"
    message = "Authorization token required"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class ConflictError(AppError):
    status_code = 400
    code = "SLUG_EXISTS"
    message = "Slug already exists"


class UploadError(AppError):
    status_code = 400
    code = "UPLOAD_ERROR"
    message = "Upload rejected"


class InternalError(AppError):
    status_code = 500
    code = "INTERNAL_ERROR"
    message = "Internal server error"


def error_body(message: str, code: str, details: Any = None) -> dict:
    error = {"message": message, "code": code}
    if details is not None:
        error["details"] = details
    return {"error": error}


def _validation_details(errors) -> list[dict]:
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return details


async def _app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code))
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code, exc.details))


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=error_body("Validation failed", "VALIDATION_ERROR", _validation_details(exc.errors())),
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    code = STATUS_CODES.get(exc.status_code, "INTERNAL_ERROR" if exc.status_code >= 500 else "BAD_REQUEST")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == 404 and message == "Not Found":
        message = "Route not found"
    return JSONResponse(status_code=exc.status_code, content=error_body(message, code), headers=exc.headers)


async def _database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("Internal server error", "INTERNAL_ERROR"))


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("Internal server error", "INTERNAL_ERROR"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
