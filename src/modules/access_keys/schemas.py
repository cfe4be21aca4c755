"""Access key records, finalized requests and field errors."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.constants import (
    ACCESS_KEY_NAME_MAX_LENGTH,
    DATA_LIMIT_MAX,
    DATA_LIMIT_MIN,
)
from src.core.messages import MessageCode, get_default_message
from .quota import DEFAULT_DATA_LIMIT_UNIT, DataLimitUnit


class DraftField(str, Enum):
    """Draft fields that carry their own validation state."""

    SERVER_ID = "server_id"
    NAME = "name"
    DATA_LIMIT = "data_limit"
    DATA_LIMIT_UNIT = "data_limit_unit"
    EXPIRES_AT = "expires_at"


class AccessKeyRecord(BaseModel):
    """Stored access key snapshot used to seed an edit session."""

    id: int
    server_id: int
    name: str
    data_limit: int | None = None
    data_limit_unit: DataLimitUnit | None = None
    expires_at: datetime | None = None

    model_config = {"from_attributes": True}


class NewAccessKeyRequest(BaseModel):
    """Request handed to the create collaborator."""

    server_id: int
    name: str = Field(..., min_length=1, max_length=ACCESS_KEY_NAME_MAX_LENGTH)
    data_limit: int | None = Field(default=None, ge=DATA_LIMIT_MIN, le=DATA_LIMIT_MAX)
    data_limit_unit: DataLimitUnit = DEFAULT_DATA_LIMIT_UNIT
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def validate_expires_at(cls, v):
        if v is None:
            return v

        if v.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

        return v


class EditAccessKeyRequest(NewAccessKeyRequest):
    """Request handed to the update collaborator."""

    id: int


FinalizedRequest = NewAccessKeyRequest | EditAccessKeyRequest


class FieldError(BaseModel):
    field: DraftField
    message_code: MessageCode
    message: str

    @classmethod
    def for_code(cls, field: DraftField, message_code: MessageCode) -> "FieldError":
        return cls(
            field=field,
            message_code=message_code,
            message=get_default_message(message_code),
        )


class DraftValidationFailure(BaseModel):
    """All field errors found when finalizing a draft."""

    message_code: MessageCode = MessageCode.VALIDATION_ERROR
    errors: list[FieldError]

    @property
    def fields(self) -> set[DraftField]:
        return {error.field for error in self.errors}

    def for_field(self, field: DraftField) -> FieldError | None:
        return next((error for error in self.errors if error.field == field), None)
