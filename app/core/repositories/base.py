from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models.base import Base
from app.infrastructure.errors.base import StorageFault
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class SqlAlchemyRepository(Generic[ModelType]):

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    @asynccontextmanager
    async def _storage_guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(
                "storage_fault",
                model=self.model.__name__,
                operation=operation,
                error=str(exc),
            )
            raise StorageFault() from exc

    async def get_all_items(self) -> list[ModelType]:
        async with self._storage_guard("get_all_items"):
            query = select(self.model).order_by(self.model.id)
            items = await self.session.execute(query)
            return list(items.scalars().all())

    async def get_item(self, item_id: int) -> ModelType | None:
        async with self._storage_guard("get_item"):
            return await self.session.get(self.model, item_id)

    async def add_item(self, item: ModelType) -> ModelType:
        async with self._storage_guard("add_item"):
            self.session.add(item)
            await self.session.commit()
            # server defaults are only visible after reading the row back
            await self.session.refresh(item)
            return item

    async def update_item(self, item_id: int, **values) -> ModelType | None:
        async with self._storage_guard("update_item"):
            query = update(self.model).where(self.model.id == item_id).values(**values)
            result = await self.session.execute(query)
            await self.session.commit()
            if result.rowcount == 0:
                return None
            return await self.session.get(self.model, item_id, populate_existing=True)

    async def delete_item(self, item_id: int) -> bool:
        async with self._storage_guard("delete_item"):
            query = delete(self.model).where(self.model.id == item_id)
            result = await self.session.execute(query)
            await self.session.commit()
            return result.rowcount > 0
