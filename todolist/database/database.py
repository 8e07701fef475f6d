"""Database connection and session management for todolist.

This module supports both:
- Local SQLite (default for dev)
- PostgreSQL or any other SQLAlchemy URL in production via `DATABASE_URL`
"""

import logging
import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Database URL - SQLite by default (local dev)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./todolist.db")


def _is_sqlite_url(database_url: str) -> bool:
    return "sqlite" in (database_url or "")


def get_engine_kwargs(database_url: str) -> dict:
    """Return deterministic create_engine kwargs for a DB URL.

    This is separated to allow deterministic unit testing without connecting.
    """
    engine_kwargs: dict = {
        "echo": os.getenv("DEBUG", "False").lower() == "true",
        # Drops stale pooled connections before use.
        "pool_pre_ping": True,
    }

    if _is_sqlite_url(database_url):
        # SQLite connections are shared across FastAPI's threadpool workers.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        return engine_kwargs

    engine_kwargs["pool_size"] = int(os.getenv("DB_POOL_SIZE", "5"))
    engine_kwargs["max_overflow"] = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    engine_kwargs["pool_timeout"] = int(os.getenv("DB_POOL_TIMEOUT_SEC", "30"))
    return engine_kwargs


def build_engine(database_url: str) -> Engine:
    return create_engine(database_url, **get_engine_kwargs(database_url))


# Create engine (module-level singleton)
engine = build_engine(DATABASE_URL)


@event.listens_for(Engine, "connect")
def set_sqlite_pragmas(dbapi_conn, connection_record):
    """Enable foreign keys on SQLite connections (needed for ON DELETE CASCADE)."""
    if type(dbapi_conn).__module__.startswith("sqlite3"):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative models
Base = declarative_base()


def get_db() -> Session:
    """Get database session (dependency for FastAPI)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def build_alembic_config(database_url: str):
    """Alembic config for running migrations in-process against `database_url`.

    The application owns logging, so env.py is told not to apply the
    logger sections of alembic.ini.
    """
    from alembic.config import Config

    alembic_cfg = Config(os.getenv("ALEMBIC_INI", "alembic.ini"))
    # configparser interpolation: a literal "%" in the URL must be doubled.
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    alembic_cfg.attributes["url_overridden"] = True
    alembic_cfg.attributes["configure_logger"] = False
    return alembic_cfg


def init_db(*, engine_override: Engine = None) -> None:
    """Initialize database schema.

    - SQLite (default dev): use `create_all()`.
    - Other databases: prefer Alembic migrations when `RUN_MIGRATIONS=true`.
    """
    # Importing registers the tables on Base.metadata.
    from todolist.database import models  # noqa: F401

    use_engine = engine_override or engine
    run_migrations = os.getenv("RUN_MIGRATIONS", "False").lower() == "true"
    if run_migrations and not _is_sqlite_url(str(use_engine.url)):
        from alembic import command

        alembic_cfg = build_alembic_config(use_engine.url.render_as_string(hide_password=False))
        logger.info("Running Alembic migrations to head")
        command.upgrade(alembic_cfg, "head")
        return

    Base.metadata.create_all(bind=use_engine)
