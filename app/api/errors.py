"""Translate domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.errors import (
    BookNotFoundError,
    CatalogError,
    DuplicateBookError,
    InsufficientCatalogError,
    NoCopyAvailableError,
    NoMatchingReturnError,
    RecommendationConsistencyError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    BookNotFoundError: status.HTTP_404_NOT_FOUND,
    NoCopyAvailableError: status.HTTP_409_CONFLICT,
    NoMatchingReturnError: status.HTTP_409_CONFLICT,
    DuplicateBookError: status.HTTP_409_CONFLICT,
    InsufficientCatalogError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RecommendationConsistencyError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: CatalogError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(CatalogError, catalog_error_handler)
