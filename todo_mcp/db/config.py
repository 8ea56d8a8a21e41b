"""Database configuration for the Todo MCP server."""
from sqlmodel import create_engine
import logging
import os
from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

# Load environment variables from a local .env file, if present
load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./todos.db")


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url


def create_db_engine(database_url: str = DATABASE_URL) -> Engine:
    """
    Create the SQLModel engine for a database URL.

    SQLite connections are shared across threads (the HTTP transport serves
    requests from a worker thread), and an in-memory database is pinned to a
    single connection so every session sees the same data.
    """
    if not database_url.startswith("sqlite"):
        logger.info("[DB CONFIG] Using database: %s", database_url.split("@")[-1])
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    logger.info("[DB CONFIG] Using SQLite database: %s", database_url)
    connect_args = {"check_same_thread": False}

    if _is_memory_sqlite(database_url):
        db_engine = create_engine(database_url, echo=False, connect_args=connect_args, poolclass=StaticPool)
    else:
        db_engine = create_engine(database_url, echo=False, connect_args=connect_args)

    in_memory = _is_memory_sqlite(database_url)

    @event.listens_for(db_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if not in_memory:
            cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return db_engine


# Process-wide engine, opened once and disposed at shutdown
engine = create_db_engine(DATABASE_URL)
