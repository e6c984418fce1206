"""Common constants used across the application."""

from typing import Callable, Dict, Type

from fastapi import HTTPException, status

from .exceptions import DomainError, PermissionDeniedError, StoreFailureError

INTERNAL_ERROR_DETAIL = "Internal server error"

EXCEPTION_MAPPING: Dict[Type[DomainError], Callable[[str], HTTPException]] = {
    PermissionDeniedError: lambda message: HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=message),
    StoreFailureError: lambda message: HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL
    ),
}

DEFAULT_PAGE_LIMIT = 50
