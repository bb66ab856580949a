"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().

The engine is not created at import time. The application
factory builds one pooled engine and keeps the session factory
on app.state, so tests and alternative deployments can supply
their own.
"""

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase


def build_engine(database_url: str, pool_pre_ping: bool = True) -> Engine:
    """
    Create the pooled engine for the ledger database.

    pool_pre_ping=True tests connections before using them,
    which handles a restarted database or a stale connection.
    SQLite connections are shared across the server's worker
    threads, so the same-thread check is disabled for it.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        pool_pre_ping=pool_pre_ping,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory bound to the given engine.

    autocommit=False means we explicitly control when changes
    are saved: a movement and its idempotency record are
    committed together or not at all.
    autoflush=False means SQL is only sent when we explicitly
    flush or commit.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
    )


class Base(DeclarativeBase):
    pass


def init_db(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    # Import so every model is registered on Base.metadata
    import account_ledger.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# --- Dependency for FastAPI ---
def get_db(request: Request):
    """
    Provide a database session for a single request.

    The try/finally pattern ensures the session is always
    closed, preventing connection leaks.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
