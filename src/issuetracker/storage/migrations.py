"""Database migration handling with automatic upgrade on startup"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

logger = logging.getLogger(__name__)


def get_migration_config(database_url: str) -> Config:
    """Get Alembic configuration"""
    # This file is in issuetracker/storage/, so we go up one level to get to issuetracker/
    package_root = Path(__file__).parent.parent

    # Look for alembic.ini and migrations in the package directory
    alembic_ini = package_root / "alembic.ini"
    migrations_dir = package_root / "migrations"

    if not alembic_ini.exists():
        raise FileNotFoundError(
            f"alembic.ini not found at {alembic_ini}. "
            "This indicates an incomplete installation. "
            "Please reinstall issuetracker."
        )

    if not migrations_dir.exists():
        raise FileNotFoundError(
            f"migrations directory not found at {migrations_dir}. "
            "This indicates an incomplete installation. "
            "Please reinstall issuetracker."
        )

    alembic_cfg = Config(str(alembic_ini))
    alembic_cfg.set_main_option("script_location", str(migrations_dir))
    # ConfigParser interpolation treats % specially (URL-encoded passwords)
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def ensure_sqlite_directory(database_url: str):
    """Create the parent directory of a file-based SQLite database"""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def needs_migration(database_url: str) -> bool:
    """Check if database needs migration"""
    engine = create_engine(database_url)
    try:
        with engine.connect() as conn:
            context = MigrationContext.configure(conn)
            current_rev = context.get_current_revision()
    finally:
        engine.dispose()

    script_dir = ScriptDirectory.from_config(get_migration_config(database_url))
    head_rev = script_dir.get_current_head()
    return current_rev != head_rev


def run_migrations(database_url: str):
    """Run any pending migrations"""
    command.upgrade(get_migration_config(database_url), "head")


def initialize_database(database_url: str):
    """Initialize database on first run or run migrations on upgrade"""
    ensure_sqlite_directory(database_url)

    if needs_migration(database_url):
        logger.info("Database migration required, upgrading to head")
        try:
            run_migrations(database_url)
        except Exception:
            logger.exception("Migration failed")
            raise
        logger.info("Database is now at the latest revision")
    else:
        logger.info("Database is up to date")
