from datetime import datetime, timezone

from src.core.constants import ACCESS_KEY_NAME_MAX_LENGTH
from src.core.messages import MessageCode
from .quota import DataLimitUnit, is_magnitude_in_range
from .schemas import DraftField, FieldError


def as_utc(instant: datetime) -> datetime:
    """Read naive datetimes as UTC and normalize aware ones to UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def parse_data_limit(value: object) -> object:
    """Turn text field input into a magnitude; blank text clears the limit.

    Values that are not integers are returned unchanged so the range check
    can flag them.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            return value
    return value


def validate_name(name: str) -> FieldError | None:
    if not name:
        return FieldError.for_code(DraftField.NAME, MessageCode.NAME_REQUIRED)
    if len(name) > ACCESS_KEY_NAME_MAX_LENGTH:
        return FieldError.for_code(DraftField.NAME, MessageCode.NAME_TOO_LONG)
    return None


def validate_data_limit(data_limit: object) -> FieldError | None:
    if data_limit is None:
        return None
    if isinstance(data_limit, bool) or not isinstance(data_limit, int):
        return FieldError.for_code(
            DraftField.DATA_LIMIT, MessageCode.DATA_LIMIT_NOT_INTEGER
        )
    if not is_magnitude_in_range(data_limit):
        return FieldError.for_code(
            DraftField.DATA_LIMIT, MessageCode.DATA_LIMIT_OUT_OF_RANGE
        )
    return None


def validate_data_limit_unit(unit: object) -> FieldError | None:
    if isinstance(unit, DataLimitUnit):
        return None
    return FieldError.for_code(
        DraftField.DATA_LIMIT_UNIT, MessageCode.DATA_LIMIT_UNIT_INVALID
    )


def validate_expires_at(expires_at: datetime | None, now: datetime) -> FieldError | None:
    # An expiration equal to "now" is still accepted
    if expires_at is None:
        return None
    if as_utc(expires_at) < as_utc(now):
        return FieldError.for_code(
            DraftField.EXPIRES_AT, MessageCode.EXPIRATION_IN_PAST
        )
    return None


def validate_server_id(server_id: int | None) -> FieldError | None:
    if server_id is None:
        return FieldError.for_code(DraftField.SERVER_ID, MessageCode.SERVER_REQUIRED)
    return None
