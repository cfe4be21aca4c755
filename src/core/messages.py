"""Centralized message codes and default messages for access key results."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for validation errors and collaborator results."""

    # Success codes
    SUCCESS = "SUCCESS"
    ACCESS_KEY_CREATED = "ACCESS_KEY_CREATED"
    ACCESS_KEY_UPDATED = "ACCESS_KEY_UPDATED"

    # Field validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NAME_REQUIRED = "NAME_REQUIRED"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    DATA_LIMIT_NOT_INTEGER = "DATA_LIMIT_NOT_INTEGER"
    DATA_LIMIT_OUT_OF_RANGE = "DATA_LIMIT_OUT_OF_RANGE"
    DATA_LIMIT_UNIT_INVALID = "DATA_LIMIT_UNIT_INVALID"
    EXPIRATION_IN_PAST = "EXPIRATION_IN_PAST"
    SERVER_REQUIRED = "SERVER_REQUIRED"

    # Collaborator failures
    ACCESS_KEY_NAME_TAKEN = "ACCESS_KEY_NAME_TAKEN"
    ACCESS_KEY_NOT_FOUND = "ACCESS_KEY_NOT_FOUND"
    QUOTA_REJECTED = "QUOTA_REJECTED"
    SERVER_NOT_FOUND = "SERVER_NOT_FOUND"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Programmer errors
    INVALID_DRAFT_STATE = "INVALID_DRAFT_STATE"
    QUOTA_OUT_OF_RANGE = "QUOTA_OUT_OF_RANGE"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.ACCESS_KEY_CREATED: "Access key created successfully",
    MessageCode.ACCESS_KEY_UPDATED: "Access key updated successfully",
    # Field validation
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.NAME_REQUIRED: "Access key name is required",
    MessageCode.NAME_TOO_LONG: "Access key name is too long",
    MessageCode.DATA_LIMIT_NOT_INTEGER: "Data limit must be a whole number",
    MessageCode.DATA_LIMIT_OUT_OF_RANGE: "Data limit is out of range",
    MessageCode.DATA_LIMIT_UNIT_INVALID: "Unknown data limit unit",
    MessageCode.EXPIRATION_IN_PAST: "Expiration date must be in the future",
    MessageCode.SERVER_REQUIRED: "A server must be selected",
    # Collaborator failures
    MessageCode.ACCESS_KEY_NAME_TAKEN: "An access key with this name already exists",
    MessageCode.ACCESS_KEY_NOT_FOUND: "Access key not found",
    MessageCode.QUOTA_REJECTED: "Data limit rejected by the server",
    MessageCode.SERVER_NOT_FOUND: "Server not found",
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    # Programmer errors
    MessageCode.INVALID_DRAFT_STATE: "Operation not allowed in the current draft state",
    MessageCode.QUOTA_OUT_OF_RANGE: "Quota magnitude is out of range",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal error",
}


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")


class CollaboratorResult(BaseModel):
    """Result of a create/update call with consistent structure."""

    ok: bool
    message_code: MessageCode
    message: str
    access_key_id: int | None = None
    details: dict[str, Any] = {}

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        access_key_id: int | None = None,
    ) -> "CollaboratorResult":
        """Create a success result."""
        return cls(
            ok=True,
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            access_key_id=access_key_id,
        )

    @classmethod
    def failure(
        cls,
        message_code: MessageCode,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> "CollaboratorResult":
        """Create a failure result."""
        return cls(
            ok=False,
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Error occurred"),
            details=details or {},
        )
