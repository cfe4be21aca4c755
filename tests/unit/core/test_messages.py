"""Tests for message codes, collaborator results and exceptions."""

import pytest

from src.core.exceptions import AccessKeyAdminException, DraftStateError, QuotaRangeError
from src.core.messages import (
    DEFAULT_MESSAGES,
    CollaboratorResult,
    MessageCode,
    get_default_message,
)


def test_every_message_code_has_default_message():
    missing = [code for code in MessageCode if code not in DEFAULT_MESSAGES]
    assert missing == []


def test_get_default_message():
    assert get_default_message(MessageCode.NAME_TOO_LONG) == "Access key name is too long"


class TestCollaboratorResult:
    def test_success(self):
        result = CollaboratorResult.success(MessageCode.ACCESS_KEY_CREATED, access_key_id=3)

        assert result.ok is True
        assert result.message == "Access key created successfully"
        assert result.access_key_id == 3
        assert result.details == {}

    def test_failure_with_details(self):
        result = CollaboratorResult.failure(
            MessageCode.QUOTA_REJECTED, details={"limit_bytes": 10}
        )

        assert result.ok is False
        assert result.message == "Data limit rejected by the server"
        assert result.details == {"limit_bytes": 10}

    def test_custom_message(self):
        result = CollaboratorResult.failure(
            MessageCode.EXTERNAL_SERVICE_ERROR, message="Server unreachable"
        )

        assert result.message == "Server unreachable"


class TestExceptions:
    def test_base_exception_response_dict(self):
        exc = AccessKeyAdminException(MessageCode.INTERNAL_ERROR, {"reason": "x"})

        assert exc.to_response_dict() == {
            "message_code": MessageCode.INTERNAL_ERROR,
            "message": "Internal error",
            "details": {"reason": "x"},
        }

    def test_draft_state_error_message(self):
        exc = DraftStateError("finalize", "submitting")

        assert isinstance(exc, AccessKeyAdminException)
        assert exc.message_code == MessageCode.INVALID_DRAFT_STATE
        assert "cannot finalize while submitting" in str(exc)

    def test_quota_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise QuotaRangeError(-1, "GB")
