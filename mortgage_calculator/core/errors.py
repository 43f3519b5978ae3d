# This project was developed with assistance from AI tools.
"""Helpers for building RFC 7807 error responses."""

import uuid

from fastapi import Request

from ..schemas.error import ErrorResponse

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def get_request_id(request: Request) -> str:
    """Correlation ID from the ``x-request-id`` header, or a fresh one."""
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def build_error(
    status_code: int,
    detail: str,
    request_id: str,
    errors: dict[str, str] | None = None,
) -> ErrorResponse:
    return ErrorResponse(
        type="about:blank",
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        errors=errors or {},
    )
