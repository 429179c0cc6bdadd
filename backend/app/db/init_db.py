from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base_class import Base
from app.db.session import engine as default_engine

# Register models on the shared metadata
from app.domains.ticker_groups.models.storage import StorageEntry  # noqa: F401


async def init_db(engine: Optional[AsyncEngine] = None) -> None:
    async with (engine or default_engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
