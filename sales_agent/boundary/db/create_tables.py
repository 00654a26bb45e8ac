"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, sales_agent.configs
System role: Database schema initialization

Usage:
    python -m sales_agent.boundary.db.create_tables
"""

import asyncio
import logging

from sales_agent.boundary.db.base import Base
from sales_agent.boundary.db.connection import get_async_engine
from sales_agent.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from sales_agent.boundary.db.models import (  # noqa: F401
    GuidelineModel,
    GuidelineUsageModel,
    MessageModel,
    SessionModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails

    Usage:
        python -m sales_agent.boundary.db.create_tables
        # Or in code:
        await create_all_tables()
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully.")


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Usage:
        from sales_agent.boundary.db.create_tables import drop_all_tables, create_all_tables
        await drop_all_tables()
        await create_all_tables()  # Reinitialize clean database
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped successfully.")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
