"""Utility functions for mapping domain exceptions to HTTP exceptions."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ....infrastructure.logging import get_logger
from ..constants import EXCEPTION_MAPPING, INTERNAL_ERROR_DETAIL
from ..exceptions import DomainError, StoreFailureError

logger = get_logger(__name__)


def map_exception(error: DomainError) -> HTTPException:
    """Map a domain exception to a corresponding HTTP exception."""
    for exception_class, mapper in EXCEPTION_MAPPING.items():
        if isinstance(error, exception_class):
            return mapper(str(error))

    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers for domain exceptions."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Convert domain exceptions to appropriate HTTP responses."""
        if isinstance(exc, StoreFailureError):
            logger.error(
                f"Store failure while handling {request.url.path}: {exc}",
                exc_info=exc.__cause__ or exc,
            )

        http_exception = map_exception(exc)
        return JSONResponse(
            status_code=http_exception.status_code,
            content={"detail": http_exception.detail},
        )
