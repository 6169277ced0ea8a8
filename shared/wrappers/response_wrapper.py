import json
import logging
from typing import Any, Callable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shared.core.schemas import JsonOutResult

logger = logging.getLogger(__name__)

# keys whose null value should reach the client as an empty list
LIST_KEYS = {"items", "children", "roles", "hazards", "versions", "errors"}

UNWRAPPED_PATHS = ("/openapi", "/docs", "/redoc")


def replace_nulls_with_empty(value: Any):
    """
    Recursively replaces None based on expected structure:
    - List fields -> []
    - Primitives -> ""
    """
    if isinstance(value, dict):
        return {
            k: [] if v is None and k.lower() in LIST_KEYS else replace_nulls_with_empty(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [replace_nulls_with_empty(v) for v in value]
    if value is None:
        return ""
    return value


def envelope(data: Any, status: str, status_code: str, message: str,
             http_status: int, headers: Optional[dict] = None) -> JSONResponse:
    body = JsonOutResult(
        data=data, status=status, status_code=status_code, message=message
    ).model_dump(exclude_none=False)
    return JSONResponse(
        content=replace_nulls_with_empty(body),
        status_code=http_status,
        headers=headers,
    )


def _error_details(data: Any, http_status: int):
    """(message, application status code) of an error body."""
    if isinstance(data, dict):
        detail = data.get("detail")
        source = detail if isinstance(detail, dict) else data
        message = detail if isinstance(detail, str) else source.get("message")
        return str(message or ""), str(source.get("status_code") or http_status)
    if isinstance(data, str):
        return data, str(http_status)
    return "An unexpected error occurred", str(http_status)


class JsonResponseMiddleware(BaseHTTPMiddleware):
    """Wraps every JSON response in {data, status, status_code, message}."""

    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path.startswith(UNWRAPPED_PATHS):
            return await call_next(request)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return envelope("", "Failed", "500", f"Internal Server Error: {e}", 500)

        if "application/json" not in response.headers.get("content-type", ""):
            return response

        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        try:
            data = json.loads(body_bytes.decode("utf-8")) if body_bytes else None
        except ValueError:
            data = None

        headers = {k: v for k, v in response.headers.items() if k.lower() != "content-length"}

        if not (200 <= response.status_code < 400):
            message, status_code = _error_details(data, response.status_code)
            return envelope("", "Failed", status_code, message, response.status_code, headers)

        # already an envelope
        if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
            return JSONResponse(
                content=replace_nulls_with_empty(data),
                status_code=response.status_code,
                headers=headers,
            )

        return envelope(
            data if data not in [None, {}] else "",
            "Success",
            str(response.status_code),
            "Data retrieved successfully",
            response.status_code,
            headers,
        )
