"""Conversion between unit-scaled data limits and canonical byte counts."""

from enum import Enum
from typing import Protocol

from src.core.constants import (
    BYTES_PER_GB,
    BYTES_PER_KB,
    BYTES_PER_MB,
    DATA_LIMIT_MAX,
    DATA_LIMIT_MIN,
)
from src.core.exceptions import QuotaRangeError


class DataLimitUnit(str, Enum):
    """Units offered for an access key data limit."""

    BYTES = "Bytes"
    KB = "KB"
    MB = "MB"
    GB = "GB"


DEFAULT_DATA_LIMIT_UNIT = DataLimitUnit.BYTES

# Mapping from unit to its size in bytes
UNIT_MULTIPLIERS: dict[DataLimitUnit, int] = {
    DataLimitUnit.BYTES: 1,
    DataLimitUnit.KB: BYTES_PER_KB,
    DataLimitUnit.MB: BYTES_PER_MB,
    DataLimitUnit.GB: BYTES_PER_GB,
}


class StoredDataLimit(Protocol):
    data_limit: int | None
    data_limit_unit: DataLimitUnit | str | None


def coerce_unit(value: DataLimitUnit | str) -> DataLimitUnit:
    """Parse a unit from an enum member or its display value."""
    if isinstance(value, DataLimitUnit):
        return value
    try:
        return DataLimitUnit(value)
    except ValueError:
        raise ValueError(f"unknown data limit unit: {value!r}") from None


def is_magnitude_in_range(magnitude: object) -> bool:
    """Check a magnitude is an integer within the supported bounds."""
    if isinstance(magnitude, bool) or not isinstance(magnitude, int):
        return False
    return DATA_LIMIT_MIN <= magnitude <= DATA_LIMIT_MAX


def unit_multiplier(unit: DataLimitUnit | str) -> int:
    """Number of bytes in one ``unit``."""
    return UNIT_MULTIPLIERS[coerce_unit(unit)]


def to_canonical_bytes(magnitude: int, unit: DataLimitUnit | str) -> int:
    """Convert a magnitude in ``unit`` to bytes.

    The bound applies to the magnitude as entered, in its own unit, and is
    checked before the conversion.

    Raises:
        QuotaRangeError: If the magnitude is not an integer in range.
    """
    unit = coerce_unit(unit)
    if not is_magnitude_in_range(magnitude):
        raise QuotaRangeError(magnitude, unit.value)
    return magnitude * UNIT_MULTIPLIERS[unit]


def from_canonical_bytes(byte_count: int, unit: DataLimitUnit | str) -> int:
    """Express a byte count in ``unit``, rounding down to whole units."""
    unit = coerce_unit(unit)
    if isinstance(byte_count, bool) or not isinstance(byte_count, int) or byte_count < 0:
        raise QuotaRangeError(byte_count, unit.value)
    return byte_count // UNIT_MULTIPLIERS[unit]


def seed_unit_and_magnitude(
    record: StoredDataLimit,
) -> tuple[int | None, DataLimitUnit]:
    """Return the stored data limit and unit as-is for editing.

    The stored unit is kept even when a larger unit would fit, so the
    editor shows the same unit the key was saved with. Records without a
    unit read as bytes.
    """
    unit = record.data_limit_unit
    if unit is None:
        return record.data_limit, DEFAULT_DATA_LIMIT_UNIT
    return record.data_limit, coerce_unit(unit)


def unit_options() -> list[DataLimitUnit]:
    """Units in display order, smallest first."""
    return list(DataLimitUnit)
