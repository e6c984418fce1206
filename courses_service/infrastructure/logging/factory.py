"""Logger factory with lazy, settings-driven configuration."""

import inspect
import logging
from threading import Lock
from typing import Optional, Union

from ..config.settings import get_settings
from .config import setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


def get_logger(name: Optional[str] = None, **extra_context) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a configured logger, detecting the calling module if no name is given.

    Args:
        name: Logger name. If None, detected from the calling module.
        **extra_context: Context merged into every record of the returned logger.

    Returns:
        A logger, or a LoggerAdapter when extra context is supplied.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.info("Track title updated", extra={"track_id": 5})

        rpc_logger = get_logger(__name__, component="user_anchor")
        ```
    """
    _ensure_logging_configured()

    if name is None:
        name = _detect_calling_module()

    base_logger = logging.getLogger(name)

    if extra_context:
        return logging.LoggerAdapter(base_logger, extra_context)
    return base_logger


def configure_logging() -> None:
    """Configure logging now instead of on the first get_logger call."""
    global _logging_configured

    with _configuration_lock:
        if _logging_configured:
            return

        setup_logging_configuration()
        _logging_configured = True

        settings = get_settings()
        logging.getLogger(__name__).info(
            f"Logging configured for {settings.ENVIRONMENT.value} environment",
            extra={"log_level": settings.LOG_LEVEL, "log_format": settings.LOG_FORMAT},
        )


def _ensure_logging_configured() -> None:
    if not _logging_configured:
        configure_logging()


def _detect_calling_module() -> str:
    frame = inspect.currentframe()

    try:
        for _ in range(2):
            if frame is None:
                break
            frame = frame.f_back

        if frame is None:
            return "unknown"
        return str(frame.f_globals.get("__name__", "unknown"))

    finally:
        del frame
