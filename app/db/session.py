"""Database engine and session utilities.

This module creates the SQLAlchemy engine and session factory used by the
API. It also offers a lightweight SQLite fallback for local development when
the configured database is unreachable.
"""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments suited to *database_url*."""

    try:
        parsed_url: URL = make_url(database_url)
    except Exception:
        return {"pool_pre_ping": True}

    if parsed_url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed_url.database in (None, "", ":memory:"):
        # Une base en mémoire n'existe que pour une connexion : on la partage.
        options["poolclass"] = StaticPool
    return options


def _should_enable_sqlite_fallback() -> bool:
    environment = (getattr(settings, "ENVIRONMENT", "development") or "").lower()
    if os.getenv("DISABLE_SQLITE_FALLBACK") == "1":
        return False
    return environment in {"development", "local"}


SQLITE_FALLBACK_URL = "sqlite:///./jlpt_local.db"

# These globals are populated by ``configure_database``.
engine: Engine
SessionLocal: sessionmaker


def _install_slow_query_logger(target: Engine) -> None:
    """Attach callbacks that warn when queries exceed the configured threshold."""

    threshold_ms = max(getattr(settings, "SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS", 0) or 0, 0)
    if threshold_ms == 0:
        return

    marker = "_jlpt_slow_query_hook"
    if getattr(target, marker, False):
        return

    setattr(target, marker, True)

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        context._jlpt_query_start = perf_counter()

    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        start = getattr(context, "_jlpt_query_start", None)
        if start is None:
            return

        elapsed_ms = (perf_counter() - start) * 1000.0
        if elapsed_ms < threshold_ms:
            return

        snippet = " ".join(statement.split()) if isinstance(statement, str) else str(statement)
        if len(snippet) > 200:
            snippet = snippet[:197] + "..."

        params_preview = repr(parameters)
        if len(params_preview) > 200:
            params_preview = params_preview[:197] + "..."

        logger.warning(
            "SQL lente (%.1f ms) - %s | params=%s",
            elapsed_ms,
            snippet,
            params_preview,
        )

    event.listen(target, "before_cursor_execute", _before_cursor_execute)
    event.listen(target, "after_cursor_execute", _after_cursor_execute)


def _verify_database_connection(target: Engine) -> None:
    with target.connect() as connection:
        connection.execute(text("SELECT 1"))


def configure_database(database_url: str | None = None, *, allow_fallback: bool = True) -> None:
    """Initialise the engine and session factory.

    ``database_url`` defaults to the environment configuration. When the
    connection attempt fails locally we fall back to a SQLite file so the API
    can boot without a running database server.
    """

    global engine, SessionLocal

    target_url = str(database_url or settings.DATABASE_URL)
    logger.info("Configuration de la base de données: %s", make_url(target_url).render_as_string(hide_password=True))

    candidate_engine = create_engine(target_url, **_engine_options(target_url))
    _install_slow_query_logger(candidate_engine)

    try:
        _verify_database_connection(candidate_engine)
    except (OperationalError, OSError) as exc:
        if allow_fallback and _should_enable_sqlite_fallback():
            logger.warning(
                "Impossible de joindre la base de données '%s' (%s). Bascule automatique vers SQLite.",
                target_url,
                exc,
            )
            candidate_engine.dispose()
            configure_database(SQLITE_FALLBACK_URL, allow_fallback=False)
            return

        logger.error("Connexion à la base de données échouée: %s", exc)
        raise

    engine = candidate_engine
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Initialise the engine at import time so the rest of the application can use
# it immediately.
configure_database()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
