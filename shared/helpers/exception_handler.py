import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes; SQLite only reports the message text
NOT_NULL_VIOLATION = "23502"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"


def describe_integrity_error(exc: IntegrityError):
    """Map a database integrity failure to (http status, app status code, message)."""
    pgcode = getattr(exc.orig, "pgcode", None)
    text = str(exc.orig).lower()

    if pgcode == NOT_NULL_VIOLATION or "not null" in text:
        return 422, AppStatusCode.REQUIRED_VALIDATION_ERROR, "A required value is missing"
    if pgcode == FOREIGN_KEY_VIOLATION or "foreign key" in text:
        return 400, AppStatusCode.INVALID_INPUT, "A referenced record does not exist"
    if pgcode == CHECK_VIOLATION or "check constraint" in text:
        return 400, AppStatusCode.INVALID_INPUT, "A value is outside the allowed range"
    return 409, AppStatusCode.DUPLICATE_ADD_ERROR, "The record conflicts with existing data"


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", []) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "; ".join(parts) or "Invalid input"


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already carries a JsonOutResult payload
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            return JSONResponse(content=exc.detail, status_code=exc.status_code)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=str(exc.status_code or AppStatusCode.OPERATION_FAILED),
            message=str(exc.detail)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.status_code or 400)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.warning(f"Validation failed on {request.url.path}: {message}")
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.INVALID_INPUT,
            message=message
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=422)

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        logger.error(f"Integrity error on {request.url.path}: {exc.orig}")
        http_status, status_code, message = describe_integrity_error(exc)
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=status_code,
            message=message
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=http_status)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.url.path}")

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_FAILED,
            message=str(exc)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=500)
