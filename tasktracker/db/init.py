"""Initialize database tables."""
from typing import Optional
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel
import logging

from tasktracker.models.task import Task  # noqa: F401  registers the table
from tasktracker.models.user import User  # noqa: F401  registers the table
from tasktracker.db.config import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None):
    """Create all tables and indexes that do not exist yet."""
    target = engine if engine is not None else default_engine
    logger.info("Creating all tables...")
    SQLModel.metadata.create_all(target)
    logger.info("Tables created successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
