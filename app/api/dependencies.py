import re
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dto.contact import ContactDataModel, validate_contact_payload
from app.infrastructure.errors.base import ValidationError
import app.core.repositories as repositories
import app.core.services as services


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# ASCII digits only: int() alone also takes "1_0" and non-latin digits
CONTACT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# SQLite stores integers as signed 64 bit
MIN_CONTACT_ID = -(2 ** 63)
MAX_CONTACT_ID = 2 ** 63 - 1


async def get_db_session(
    request: Request,
) -> AsyncGenerator[AsyncSession, None]:
    session = await request.app.state.db_connection.get_session()
    try:
        yield session
    finally:
        await session.close()


async def get_contact_service(session=Depends(get_db_session)) -> services.ContactService:
    return services.ContactService(
        repository=repositories.ContactRepository(session=session)
    )


def get_contact_id(contact_id: str) -> int:
    value = contact_id.strip()
    if not CONTACT_ID_PATTERN.fullmatch(value):
        raise ValidationError("Invalid id")
    parsed = int(value)
    if not MIN_CONTACT_ID <= parsed <= MAX_CONTACT_ID:
        raise ValidationError("Invalid id")
    return parsed


async def get_request_payload(request: Request) -> dict[str, Any]:
    """Read the body as a flat mapping from JSON or form encoding.

    Other content types, and JSON documents that are not objects, give an
    empty mapping so that field validation reports them as missing.
    Raises ValidationError when a JSON body does not parse.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    if "json" not in content_type or not await request.body():
        return {}

    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Invalid request body") from None
    return payload if isinstance(payload, dict) else {}


async def get_contact_data(
    payload: Annotated[dict[str, Any], Depends(get_request_payload)]
) -> ContactDataModel:
    result = validate_contact_payload(payload)
    if not result.is_valid:
        raise ValidationError("Missing required fields")
    return result.data
