from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


CONTACT_FIELDS = ("name", "email", "message")


class ContactDataModel(BaseModel):
    """Mutable fields of a contact. Used for both creation and full replacement."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    created_at: str


class ContactValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: ContactDataModel | None = None
    invalid_fields: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.data is not None


def validate_contact_payload(payload: Mapping[str, Any]) -> ContactValidationResult:
    """Check that name, email and message are all present non-empty strings.

    Absent, null, empty and non-string values are rejected the same way.
    Callers decide how to render the failure.
    """
    try:
        data = ContactDataModel.model_validate(dict(payload))
    except PydanticValidationError as exc:
        failed = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        return ContactValidationResult(
            invalid_fields=tuple(field for field in CONTACT_FIELDS if field in failed)
        )
    return ContactValidationResult(data=data)
