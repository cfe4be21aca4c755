"""Exceptions raised by the access key core."""

from .messages import MessageCode, get_default_message


class AccessKeyAdminException(Exception):
    """Base exception with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        details: dict | None = None,
    ):
        self.message_code = message_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to a serializable error payload."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


class DraftStateError(AccessKeyAdminException):
    """An operation was called in a draft state that does not allow it.

    These are defects in the calling code, so they are raised rather than
    reported as field errors.
    """

    def __init__(self, operation: str, state: str):
        super().__init__(
            MessageCode.INVALID_DRAFT_STATE,
            {"operation": operation, "state": state},
        )
        self.operation = operation
        self.state = state

    def __str__(self) -> str:
        return f"{self.message}: cannot {self.operation} while {self.state}"


class QuotaRangeError(AccessKeyAdminException, ValueError):
    """Quota magnitude outside the supported range for its unit."""

    def __init__(self, magnitude: object, unit: str):
        super().__init__(
            MessageCode.QUOTA_OUT_OF_RANGE,
            {"magnitude": magnitude, "unit": unit},
        )
