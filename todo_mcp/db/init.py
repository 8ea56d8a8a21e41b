"""Initialize database tables."""
import logging

from sqlmodel import SQLModel
from sqlalchemy.engine import Engine

from todo_mcp.models.todo import Todo  # noqa: F401  registers the table
from todo_mcp.db.config import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = None):
    """Create all tables in the database (existing tables are left untouched)."""
    target = engine if engine is not None else default_engine
    logger.info("[DB INIT] Creating all tables...")
    SQLModel.metadata.create_all(target)
    logger.info("[DB INIT] Tables created successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
