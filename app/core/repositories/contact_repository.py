from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repositories.base import SqlAlchemyRepository
from app.infrastructure.database.models.contact import Contact


class ContactRepository(SqlAlchemyRepository[Contact]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, Contact)
