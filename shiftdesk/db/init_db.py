from sqlalchemy.ext.asyncio import AsyncEngine

from shiftdesk.db import models  # noqa: F401  registers tables on Base.metadata
from shiftdesk.db.database import Base, engine as default_engine


async def init_db(engine: AsyncEngine = default_engine) -> None:
    """Create the Shift and Employee tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
