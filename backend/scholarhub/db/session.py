"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from typing import Any, Dict

from flask import Flask
from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base


class Database:
    def __init__(self) -> None:
        self.engine = None
        self.Session = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        echo: bool = app.config.get("SQL_ECHO", False)

        engine_kwargs: Dict[str, Any] = {"echo": echo, "future": True}
        if url.startswith("sqlite"):
            # one shared connection so in-memory databases survive across sessions
            engine_kwargs.update(
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=app.config.get("POOL_SIZE", 10),
                max_overflow=app.config.get("MAX_OVERFLOW", 20),
            )

        self.engine = create_engine(url, **engine_kwargs)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False, future=True)
        )

        if app.config.get("AUTO_CREATE_TABLES"):
            self.create_all()

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()

    def create_all(self) -> None:
        from . import models  # noqa: F401  registers every table on Base.metadata

        assert self.engine is not None, "DB engine is not initialized"
        Base.metadata.create_all(self.engine)
        logger.info("database tables ensured on {}", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        assert self.Session is not None, "DB session is not initialized"
        return self.Session()


def _enable_sqlite_foreign_keys(dbapi_conn, _record) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


db = Database()
