# gatepass/database.py
"""
Storage wiring. Builds the configured snapshot store once per process and
exposes it as a FastAPI dependency. The SQL backend uses SQLAlchemy; all
models are imported in create_tables() so one call creates every table.
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from gatepass.config import settings
from gatepass.utils.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync routes in a thread pool
        connect_args["check_same_thread"] = False
    return create_engine(
        url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        connect_args=connect_args,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


def create_tables(engine: Engine):
    """Creates all DB tables. Safe to call multiple times."""
    from gatepass.models.snapshot import StoredSnapshot  # noqa

    Base.metadata.create_all(bind=engine)


@lru_cache(maxsize=1)
def get_store():
    """FastAPI dependency: the process-wide snapshot store."""
    from gatepass.services.snapshot_store import JsonFileStore, SqlSnapshotStore

    backend = settings.STORAGE_BACKEND.lower()
    if backend == "sql":
        engine = make_engine(settings.DATABASE_URL)
        create_tables(engine)
        logger.info(f"Storage: SQL snapshot at {engine.url.render_as_string(hide_password=True)}")
        return SqlSnapshotStore(engine)
    if backend != "json":
        raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}' (expected json or sql)")
    logger.info(f"Storage: JSON file {settings.DATABASE_FILE}")
    return JsonFileStore(settings.DATABASE_FILE)
