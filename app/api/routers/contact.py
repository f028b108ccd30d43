from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_contact_data, get_contact_id, get_contact_service
from app.core.dto.contact import ContactDataModel, ContactModel
from app.core.services.contact_service import ContactService


router = APIRouter()


@router.get(
    "",
    response_model=list[ContactModel],
    summary="List contacts",
    description="Returns every contact ordered by id"
)
async def get_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> list[ContactModel]:
    return await service.get_contacts()


@router.get(
    "/{contact_id}",
    response_model=ContactModel,
    summary="Get contact"
)
async def get_contact(
    contact_id: Annotated[int, Depends(get_contact_id)],
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactModel:
    return await service.get_contact(contact_id)


@router.post(
    "",
    response_model=ContactModel,
    status_code=status.HTTP_201_CREATED,
    summary="Create contact",
    description="Creates a contact from name, email and message"
)
async def create_contact(
    data: Annotated[ContactDataModel, Depends(get_contact_data)],
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactModel:
    return await service.create_contact(data)


@router.put(
    "/{contact_id}",
    response_model=ContactModel,
    summary="Replace contact",
    description="Overwrites name, email and message. created_at is kept"
)
async def update_contact(
    contact_id: Annotated[int, Depends(get_contact_id)],
    data: Annotated[ContactDataModel, Depends(get_contact_data)],
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> ContactModel:
    return await service.update_contact(contact_id, data)


@router.delete(
    "/{contact_id}",
    summary="Delete contact"
)
async def delete_contact(
    contact_id: Annotated[int, Depends(get_contact_id)],
    service: Annotated[ContactService, Depends(get_contact_service)]
) -> dict[str, bool]:
    await service.delete_contact(contact_id)
    return {"success": True}
