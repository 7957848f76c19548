"""
Database Reset Script
Run this to drop all tables and rebuild the schema fresh.
"""

import asyncio
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent / "src"))

from infrastructure.config import get_logger, setup_logger  # noqa: E402
from infrastructure.database import Base, get_engine, close_db  # noqa: E402
from infrastructure.database import models  # noqa: E402, F401

logger = get_logger(__name__)

async def reset_database():
    """Drop all tables and recreate them."""
    engine = get_engine()
    try:
        logger.info("🔥 Dropping all tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("✅ All tables dropped")
        
        logger.info("🏗️ Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Fresh database ready!")
        
    except Exception as e:
        logger.error(f"❌ Error: {e}")
        raise
    finally:
        await close_db()

if __name__ == "__main__":
    setup_logger(log_format="text")
    print("\n⚠️  WARNING: This will DELETE ALL applications, history and documents!\n")
    response = input("Are you sure? Type 'yes' to continue: ")
    
    if response.lower() == 'yes':
        asyncio.run(reset_database())
        print("\n✅ Database has been reset successfully!\n")
    else:
        print("\n❌ Cancelled.\n")
