"""Test utilities for asserting draft validation results."""

from src.core.messages import MessageCode
from src.modules.access_keys.schemas import DraftField, DraftValidationFailure


def assert_field_error(
    failure: DraftValidationFailure | None,
    field: DraftField,
    expected_message_code: MessageCode,
) -> None:
    """Assert that a validation failure carries the expected error for ``field``.

    Args:
        failure: Validation failure returned by the controller
        field: Field expected to be invalid
        expected_message_code: Expected message code for that field
    """
    assert failure is not None, "Expected a validation failure, got none"

    error = failure.for_field(field)
    assert error is not None, (
        f"Expected an error for {field.value}, "
        f"got errors for {sorted(f.value for f in failure.fields)}"
    )
    assert error.message_code == expected_message_code, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {error.message_code.value}"
    )
    assert error.message, "Field errors should carry a message"
