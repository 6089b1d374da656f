"""
Error envelopes for the Tennis Intel HTTP surface.

Every failure leaves the app as

    {"error": {"code": "...", "message": "...", "detail": "..."}}

- APIError subclasses cover problems with the request itself
- Upstream (ESPN) failures are always answered with 502
- FastAPI's own body validation is folded into VALIDATION_ERROR
"""

import logging
from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.http import ExternalAPIError

logger = logging.getLogger(__name__)

UPSTREAM_SERVICE = "ESPN"


class APIError(HTTPException):
    """Request-level error carrying a machine-readable code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ):
        self.code = code
        self.message = message
        self.error_detail = detail
        super().__init__(
            status_code=status_code,
            detail={"code": code, "message": message, "detail": detail},
        )


class NotFoundError(APIError):
    """Unknown capability or resource (404)."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            status_code=404,
            code="NOT_FOUND",
            message=f"{resource} not found",
            detail=f"{resource} with ID {identifier}",
        )


class ValidationError(APIError):
    """Input rejected before any upstream request (400)."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            status_code=400,
            code="VALIDATION_ERROR",
            message=message,
            detail=detail,
        )


def _envelope(status_code: int, code: str, message: str, detail: str | None = None) -> JSONResponse:
    error = {"code": code, "message": message}
    if detail:
        error["detail"] = detail
    return JSONResponse(status_code=status_code, content={"error": error})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as the standard envelope."""
    return _envelope(exc.status_code, exc.code, exc.message, exc.error_detail)


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render a malformed request body as a 400 VALIDATION_ERROR."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return await api_error_handler(
        request,
        ValidationError(message="Invalid request body", detail=detail),
    )


async def upstream_error_handler(request: Request, exc: ExternalAPIError) -> JSONResponse:
    """
    Render an upstream failure as 502.

    The upstream status (if any) stays in the message.
    """
    logger.warning(f"Upstream failure on {request.url.path}: {exc.message}")
    return _envelope(
        502,
        "EXTERNAL_API_ERROR",
        exc.message,
        f"Error from {UPSTREAM_SERVICE} API",
    )
