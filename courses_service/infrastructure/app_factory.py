from asyncio import Event
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Dict, Optional

import anyio
from fastapi import APIRouter, FastAPI, Request, Response

from ..modules.common.utils.error_handler import register_exception_handlers
from .config.settings import (
    DatabaseSettings,
    EnvironmentOption,
    EnvironmentSettings,
    Settings,
    get_settings,
)
from .database.session import create_tables, engine
from .logging import configure_logging, generate_correlation_id, get_logger, reset_correlation_id, set_correlation_id

logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")


async def set_threadpool_tokens(number_of_tokens: int = 100) -> None:
    """Configure the number of threadpool tokens for anyio."""
    limiter = anyio.to_thread.current_default_thread_limiter()
    limiter.total_tokens = number_of_tokens


def lifespan_factory(
    settings: Settings,
    create_tables_on_startup: bool = False,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    Args:
        settings: Application settings
        create_tables_on_startup: Whether to create database tables on startup

    Returns:
        An async context manager for FastAPI's lifespan
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        initialization_complete = Event()
        app.state.initialization_complete = initialization_complete

        configure_logging()
        await set_threadpool_tokens()

        try:
            if isinstance(settings, DatabaseSettings) and create_tables_on_startup:
                await create_tables()

            initialization_complete.set()
            logger.info(f"{getattr(settings, 'APP_NAME', 'Application')} started")
            yield

        finally:
            await engine.dispose()
            logger.info("Database connections released")

    return lifespan


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Bind a correlation id to the request's log records and echo it back."""
    correlation_id = next(
        (request.headers[name] for name in CORRELATION_HEADERS if request.headers.get(name)),
        None,
    ) or generate_correlation_id()

    token = set_correlation_id(correlation_id)
    try:
        response = await call_next(request)
    finally:
        reset_correlation_id(token)

    response.headers["X-Request-ID"] = correlation_id
    return response


def create_application(
    router: APIRouter,
    settings: Optional[Settings] = None,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[None]]] = None,
    create_tables_on_startup: Optional[bool] = None,
    title: Optional[str] = None,
    summary: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures a FastAPI application based on the provided settings.

    Args:
        router: The APIRouter containing the routes for the application
        settings: Application settings (uses get_settings() if None)
        lifespan: Optional lifespan function for the FastAPI app. If None, uses
            lifespan_factory, which configures logging and manages the engine.
        create_tables_on_startup: Whether to create database tables on startup.
            Defaults to settings.CREATE_TABLES_ON_STARTUP if None.
        title: The title of the API.
        summary: A short summary of the API.
        description: A detailed description of the API (supports Markdown).
        version: The version of the API.
        **kwargs: Additional keyword arguments passed to FastAPI constructor

    Returns:
        A configured FastAPI application
    """

    if settings is None:
        settings = get_settings()

    _create_tables_on_startup = False
    if create_tables_on_startup is not None:
        _create_tables_on_startup = create_tables_on_startup
    elif hasattr(settings, "CREATE_TABLES_ON_STARTUP"):
        _create_tables_on_startup = settings.CREATE_TABLES_ON_STARTUP

    metadata: Dict[str, Any] = {}

    if title is not None:
        metadata["title"] = title
    elif hasattr(settings, "APP_NAME"):
        metadata["title"] = settings.APP_NAME

    if summary is not None:
        metadata["summary"] = summary

    if description is not None:
        metadata["description"] = description
    elif hasattr(settings, "APP_DESCRIPTION"):
        metadata["description"] = settings.APP_DESCRIPTION

    if version is not None:
        metadata["version"] = version
    elif hasattr(settings, "VERSION"):
        metadata["version"] = settings.VERSION

    kwargs.update(metadata)

    hide_docs = isinstance(settings, EnvironmentSettings) and settings.ENVIRONMENT == EnvironmentOption.PRODUCTION
    if hide_docs:
        kwargs.update({"docs_url": None, "redoc_url": None, "openapi_url": None})

    if lifespan is None:
        lifespan = lifespan_factory(settings, create_tables_on_startup=_create_tables_on_startup)

    application = FastAPI(lifespan=lifespan, **kwargs)

    application.include_router(router)
    register_exception_handlers(application)
    application.middleware("http")(correlation_id_middleware)

    return application
