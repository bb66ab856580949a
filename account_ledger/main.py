"""
Account Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from account_ledger.config import Settings, get_settings
from account_ledger.logging_config import setup_logging
from account_ledger.models.base import (
    build_engine,
    build_session_factory,
    init_db,
)
from account_ledger.api.error_handlers import register_error_handlers
from account_ledger.api.health import router as health_router
from account_ledger.api.movements import router as movements_router
from account_ledger.api.accounts import router as accounts_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own pooled engine.

    The session factory lives on app.state and is handed to each
    request through get_db(); nothing holds a module-level
    connection.
    """
    settings = settings or get_settings()
    engine = build_engine(
        settings.DATABASE_URL, pool_pre_ping=settings.DB_POOL_PRE_PING,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        if settings.CREATE_TABLES:
            init_db(engine)
        logger.info(
            f"{settings.APP_NAME} {settings.APP_VERSION} started "
            f"({settings.ENVIRONMENT})"
        )
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Idempotent credit/debit movements and derived balances",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_error_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(movements_router)
    app.include_router(accounts_router)
    return app


app = create_app()
