from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from fairdatause.config import Settings
from fairdatause.errors import StorageError


logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_memory_sqlite(url: str) -> bool:
    return url in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in url


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, pool_size: int = 10) -> Engine:
    if _is_sqlite(url):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
        pool_timeout=10,
        pool_recycle=1800,
    )


class Database:
    """Storage client bound to one ``Settings`` instance.

    The engine is built on first use so that a missing or malformed
    connection string surfaces as a ``StorageError`` on the request that
    needs it rather than at import time.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None
        self._lock = threading.Lock()

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    self._engine = self._initialize()
        return self._engine

    def _initialize(self) -> Engine:
        from fairdatause import models  # noqa: F401
        from fairdatause.bootstrap import run_runtime_migrations

        url = self.settings.active_database_url
        if not url:
            env_var = self.settings.database_url_env_var
            logger.error("%s environment variable is not set", env_var)
            raise StorageError(f"{env_var} environment variable is not set")

        try:
            engine = build_engine(url, self.settings.db_pool_size)
            Base.metadata.create_all(bind=engine)
            run_runtime_migrations(engine)
        except SQLAlchemyError as exc:
            logger.error("Failed to initialize database: %s", exc)
            raise StorageError(str(exc)) from exc

        logger.info("Database engine ready (dialect=%s)", engine.dialect.name)
        return engine

    def session(self) -> Session:
        if self._session_factory is None:
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return self._session_factory()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
