import html
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.api.dependencies import get_contact_service, get_request_payload
from app.core.dto.contact import validate_contact_payload
from app.core.services.contact_service import ContactService
from app.infrastructure.errors.base import StorageFault, ValidationError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/contact",
    response_class=HTMLResponse,
    summary="Submit contact form",
    description="HTML form submission. Errors are returned as plain text"
)
async def submit_contact_form(
    request: Request,
    service: Annotated[ContactService, Depends(get_contact_service)]
):
    try:
        payload = await get_request_payload(request)
    except ValidationError as exc:
        return PlainTextResponse(exc.detail, status_code=status.HTTP_400_BAD_REQUEST)

    result = validate_contact_payload(payload)
    if not result.is_valid:
        logger.info("contact_form_rejected", invalid_fields=list(result.invalid_fields))
        return PlainTextResponse("All fields are required", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        await service.create_contact(result.data)
    except StorageFault:
        return PlainTextResponse("Error saving data", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    name = html.escape(result.data.name)
    return HTMLResponse(f'<h2>Thanks, {name}! Your message has been saved.</h2><a href="/">Back</a>')
