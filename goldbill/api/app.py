"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
import sentry_sdk
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from config import DEFAULT_SESSION_SECRET
from goldbill.api.error import register_error_handlers
from goldbill.api.middleware import LoggingMiddleware
from goldbill.api.routes import auth, calculations, customers, dashboard, invoices
from goldbill.api.security import require_login
from goldbill.worker.data_seeder import DataSeeder

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        root_logger.setLevel(level.upper())


def create_app(config) -> FastAPI:
    """
    Build the API application

    Args:
        config: Configuration class (ApplicationConfig or a subclass)
    """
    configure_logging(config.LOG_LEVEL)

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)
        logger.info("Sentry error reporting enabled")

    if config.SESSION_SECRET == DEFAULT_SESSION_SECRET:
        logger.warning(
            "SESSION_SECRET is not set, session cookies are signed with the built-in default"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.SEED_ON_STARTUP:
            seeder = DataSeeder(config=config)
            try:
                await seeder.run_once()
            finally:
                await seeder.shutdown()
        logger.info("Application startup complete")
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(title="Gold Billing Service", lifespan=lifespan)
    app.state.config = config

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        SessionMiddleware,
        secret_key=config.SESSION_SECRET,
        max_age=config.SESSION_MAX_AGE,
        https_only=config.SESSION_HTTPS_ONLY,
        same_site="lax",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    protected = [Depends(require_login)]
    app.include_router(auth.router, prefix=config.API_PREFIX)
    app.include_router(customers.router, prefix=config.API_PREFIX, dependencies=protected)
    app.include_router(calculations.router, prefix=config.API_PREFIX, dependencies=protected)
    app.include_router(invoices.router, prefix=config.API_PREFIX, dependencies=protected)
    app.include_router(dashboard.router, prefix=config.API_PREFIX, dependencies=protected)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
