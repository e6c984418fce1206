"""Environment-aware logging setup.

- Development and local: colored, detailed console output
- Staging: console output in the configured LOG_FORMAT, optional rotating file
- Production: JSON console output, noisy third-party loggers quietened
"""

import contextvars
import logging
import uuid

from ..config.settings import EnvironmentOption, get_settings
from .handlers import create_console_handler, create_file_handler, create_null_handler

correlation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)


def setup_logging_configuration() -> None:
    """Configure the root logger from application settings.

    Called once, lazily, by the logger factory. Clears any handlers that
    were installed before so repeated setup does not duplicate output.
    """
    settings = get_settings()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        handlers = _production_handlers(settings)
    elif settings.ENVIRONMENT == EnvironmentOption.STAGING:
        handlers = _staging_handlers(settings)
    else:
        handlers = _development_handlers(settings)

    for handler in handlers:
        if settings.LOG_CORRELATION_ID:
            handler.addFilter(CorrelationIdFilter())
        root_logger.addHandler(handler)

    root_logger.setLevel(settings.LOG_LEVEL_INT)

    if settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        _configure_noisy_loggers()


def _development_handlers(settings) -> list[logging.Handler]:
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        console_level = logging.DEBUG if settings.LOG_DEVELOPMENT_VERBOSE else settings.LOG_LEVEL_INT
        handlers.append(create_console_handler(format_type="detailed", level=console_level, use_colors=True))

    if settings.LOG_FILE_ENABLED:
        handlers.append(_file_handler(settings))

    return handlers


def _staging_handlers(settings) -> list[logging.Handler]:
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        handlers.append(create_console_handler(format_type=settings.LOG_FORMAT, level=settings.LOG_LEVEL_INT, use_colors=False))

    if settings.LOG_FILE_ENABLED:
        handlers.append(_file_handler(settings))

    return handlers


def _production_handlers(settings) -> list[logging.Handler]:
    handlers = []

    if settings.LOG_CONSOLE_ENABLED:
        console_level = logging.WARNING if settings.LOG_PRODUCTION_OPTIMIZE else settings.LOG_LEVEL_INT
        handlers.append(create_console_handler(format_type="json", level=console_level, use_colors=False))

    return handlers


def _file_handler(settings) -> logging.Handler:
    return create_file_handler(
        filepath=settings.LOG_FILE_PATH,
        format_type="structured",
        level=logging.DEBUG,
        max_bytes=settings.LOG_FILE_MAX_SIZE,
        backup_count=settings.LOG_FILE_BACKUP_COUNT,
    )


def _configure_noisy_loggers() -> None:
    """Raise the threshold of chatty third-party loggers in production."""
    noisy_loggers = {
        "asyncpg": logging.WARNING,
        "sqlalchemy.engine": logging.WARNING,
        "sqlalchemy.dialects": logging.WARNING,
        "sqlalchemy.pool": logging.WARNING,
        "uvicorn.access": logging.WARNING,
    }

    for logger_name, level in noisy_loggers.items():
        logging.getLogger(logger_name).setLevel(level)


def configure_testing_logging() -> None:
    """Silence everything below ERROR; used by the test suite."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(create_null_handler())
    root_logger.setLevel(logging.ERROR)

    for logger_name in ("sqlalchemy.engine", "asyncpg", "aiosqlite"):
        logging.getLogger(logger_name).setLevel(logging.ERROR)


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the correlation id of the current request."""

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, "correlation_id", correlation_id_var.get() or "no-correlation")
        return True


def set_correlation_id(correlation_id: str) -> contextvars.Token:
    """Bind a correlation id to the current context.

    Args:
        correlation_id: Unique identifier for request tracing

    Returns:
        Token that restores the previous value via :func:`reset_correlation_id`
    """
    return correlation_id_var.set(correlation_id)


def reset_correlation_id(token: contextvars.Token) -> None:
    correlation_id_var.reset(token)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context, if any."""
    return correlation_id_var.get()


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
