"""FastAPI application factory"""

import logging
import time
import sentry_sdk
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.adapter.services.database import Database
from src.api.error import register_error_handlers
from src.api.routes import invoices

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def configure_sentry(config) -> None:
    if not config.ENABLE_SENTRY or not config.DSN_SENTRY:
        return

    sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)
    logger.info(f"Sentry enabled (environment={config.SENTRY_ENVIRONMENT})")


def create_app(config, database: Database = None) -> FastAPI:
    """
    Build the API application

    Args:
        config: ApplicationConfig-like object
        database: Store handle to use; built from config.DB_URI when omitted

    Returns:
        Configured FastAPI application
    """
    configure_logging(config.LOG_LEVEL)
    configure_sentry(config)

    if database is None:
        database = Database(config.DB_URI, echo=config.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.ENSURE_SCHEMA_ON_STARTUP:
            # Raises on failure, which aborts startup
            await app.state.database.ensure_schema()
        yield
        await app.state.database.dispose()

    app = FastAPI(
        title="Nota Fiscal Service",
        description="Issues and tracks fiscal invoices (notas fiscais)",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({elapsed_ms:.1f}ms)"
            )
            return response

    register_error_handlers(app)
    app.include_router(invoices.router, prefix=config.API_PREFIX)

    return app
