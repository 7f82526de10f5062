"""
Database Initialization Script for AgriPartner API

This script creates the schema required by the FastAPI backend.
Run this before starting the API server.

Usage:
    python init_database.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy import inspect, text  # noqa: E402

from src.api.core.database import engine, Base  # noqa: E402
from src.api import models  # noqa: E402,F401  (registers every table)
from src.utils.logger import get_logger  # noqa: E402

logger = get_logger(__name__)


async def init_database() -> bool:
    """Initialize database schema"""
    logger.info("AgriPartner database initialization")

    # Test database connection
    logger.info("1. Testing database connection...")
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            logger.info(f"   ✓ Connected ({engine.dialect.name})")
    except Exception as e:
        logger.error(f"   ✗ Database connection failed: {e}")
        logger.error("Please ensure the database is reachable and your .env file is configured correctly")
        return False

    # Create tables
    logger.info("2. Creating database tables...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        for table_name in Base.metadata.tables:
            logger.info(f"      - {table_name}")
    except Exception as e:
        logger.error(f"   ✗ Failed to create tables: {e}")
        return False

    # Verify tables
    logger.info("3. Verifying tables...")
    try:
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        missing = sorted(set(Base.metadata.tables) - set(tables))
        if missing:
            logger.error(f"   ✗ Missing tables: {', '.join(missing)}")
            return False
        logger.info(f"   ✓ Found {len(tables)} tables")
    except Exception as e:
        logger.error(f"   ✗ Failed to verify tables: {e}")
        return False
    finally:
        await engine.dispose()

    logger.info("Database initialization completed successfully!")
    logger.info("Next: uvicorn src.api.main:app --reload")
    return True


if __name__ == "__main__":
    result = asyncio.run(init_database())
    sys.exit(0 if result else 1)
