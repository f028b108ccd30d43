from app.core.dto.contact import ContactDataModel, ContactModel
from app.core.repositories.contact_repository import ContactRepository
from app.infrastructure.database.models.contact import Contact
from app.infrastructure.errors.base import NotFoundError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

CONTACT_NOT_FOUND = "Contact not found"


class ContactService:

    def __init__(self, repository: ContactRepository):
        self.repository = repository

    async def get_contacts(self) -> list[ContactModel]:
        contacts = await self.repository.get_all_items()
        return [ContactModel.model_validate(contact, from_attributes=True) for contact in contacts]

    async def get_contact(self, contact_id: int) -> ContactModel:
        contact = await self.repository.get_item(contact_id)
        if contact is None:
            raise NotFoundError(CONTACT_NOT_FOUND)
        return ContactModel.model_validate(contact, from_attributes=True)

    async def create_contact(self, data: ContactDataModel) -> ContactModel:
        contact = Contact(**data.model_dump())
        created = await self.repository.add_item(contact)
        logger.info("contact_created", contact_id=created.id)
        return ContactModel.model_validate(created, from_attributes=True)

    async def update_contact(self, contact_id: int, data: ContactDataModel) -> ContactModel:
        """Replace name, email and message of an existing contact.

        Runs as three round trips: existence check, update, re-read. There is no
        lock between them; a delete that lands in between makes the update match
        no row and the call fails as not found.
        """
        if await self.repository.get_item(contact_id) is None:
            raise NotFoundError(CONTACT_NOT_FOUND)

        updated = await self.repository.update_item(contact_id, **data.model_dump())
        if updated is None:
            raise NotFoundError(CONTACT_NOT_FOUND)

        logger.info("contact_updated", contact_id=contact_id)
        return ContactModel.model_validate(updated, from_attributes=True)

    async def delete_contact(self, contact_id: int) -> None:
        if not await self.repository.delete_item(contact_id):
            raise NotFoundError(CONTACT_NOT_FOUND)
        logger.info("contact_deleted", contact_id=contact_id)
