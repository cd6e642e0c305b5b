"""
Database Reset Script
Run this to drop the OD workflow tables and rebuild the schema fresh.
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.database import models  # noqa: F401
from infrastructure.database.session import engine, Base
from infrastructure.config import get_logger, setup_logger

logger = get_logger(__name__)


async def reset_database():
    """Drop all tables and recreate them."""
    try:
        logger.info("Dropping od_applications and notifications...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Fresh database ready")

    except Exception as e:
        logger.error(f"Reset failed: {e}")
        raise
    finally:
        await engine.dispose()

if __name__ == "__main__":
    setup_logger(log_format="text")
    print("\nWARNING: This will DELETE ALL OD applications and notifications!\n")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() == 'yes':
        asyncio.run(reset_database())
        print("\nDatabase has been reset.\n")
    else:
        print("\nCancelled.\n")
