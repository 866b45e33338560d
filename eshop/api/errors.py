"""Mapping of service errors and downstream failures to HTTP responses."""

import logging
from typing import NoReturn, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from eshop.services.department_client import DownstreamServiceError
from eshop.services.results import ErrorKind, Result, ServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_BY_KIND = {
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: ServiceError) -> NoReturn:
    """Raise the HTTPException matching a service error kind."""
    headers = None
    if error.kind == ErrorKind.INVALID_CREDENTIALS:
        headers = {"WWW-Authenticate": "Bearer"}
    raise HTTPException(
        status_code=STATUS_BY_KIND[error.kind],
        detail=error.message,
        headers=headers,
    )


def unwrap(result: Result[T]) -> T:
    """Return the result value or raise the mapped HTTPException."""
    if result.error is not None:
        raise_for_error(result.error)
    return result.value


async def downstream_error_handler(request: Request, exc: DownstreamServiceError) -> JSONResponse:
    status_code = exc.status_code if 400 <= exc.status_code < 600 else 500
    logger.error(
        "Composed request failed: %s %s -> %s",
        request.method,
        request.url.path,
        status_code,
        extra={"reason": exc.message[:500]},
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"An error occurred: {exc}"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DownstreamServiceError, downstream_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
