"""Centralized logging infrastructure for the courses service.

Loggers are obtained through :func:`get_logger`, which configures the root
logger from application settings on first use. Records carry the current
request's correlation id so one RPC can be followed across modules.

Usage:
    ```python
    from courses_service.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Bookmark created", extra={"bookmark_id": 12})
    ```
"""

from .config import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
    setup_logging_configuration,
)
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "setup_logging_configuration",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "reset_correlation_id",
]
