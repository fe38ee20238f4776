"""Database engine, session scope and SQLite foreign key enforcement"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..models import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url`` with the settings this app relies on"""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False}  # SQLite specific
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(database_url, pool_pre_ping=True)


class Database:
    """Shared handle to the store: one engine and one session factory.

    Built once at process start (app factory or CLI), handed to the services
    and disposed on shutdown.
    """

    def __init__(self, database_url: str):
        self.url = database_url
        self.engine = build_engine(database_url)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get database session with automatic commit/rollback and cleanup"""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def drop_all(self):
        """Drop every table owned by the models, plus Alembic's version table"""
        Base.metadata.drop_all(bind=self.engine)
        with self.engine.begin() as conn:
            conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        logger.info("Dropped all tables on %s", self.engine.url.render_as_string(hide_password=True))

    def dispose(self):
        self.engine.dispose()

    def __repr__(self):
        return f"<Database(url='{self.engine.url.render_as_string(hide_password=True)}')>"
