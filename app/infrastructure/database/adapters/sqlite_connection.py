from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from app.infrastructure.config.config import DB_CONFIG
from app.infrastructure.database.models import Base
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class DatabaseConnection:
    def __init__(self, url: str | None = None):
        self._engine = create_async_engine(
            url=url or DB_CONFIG.get_url(is_async=True),
            echo=DB_CONFIG.DB_ECHO,
        )

    async def get_session(self) -> AsyncSession:
        return AsyncSession(bind=self._engine)

    async def init_db(self) -> None:
        """Create the contacts table if it does not exist yet."""
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("database_schema_ready", tables=sorted(Base.metadata.tables))

    async def close(self) -> None:
        await self._engine.dispose()
