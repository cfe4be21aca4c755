"""Working representation of an access key while it is being authored."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .quota import DEFAULT_DATA_LIMIT_UNIT, DataLimitUnit, seed_unit_and_magnitude
from .schemas import AccessKeyRecord
from .validators import as_utc


class DraftMode(str, Enum):
    CREATE = "Create"
    EDIT = "Edit"


class DraftState(str, Enum):
    """Lifecycle of an editing session."""

    UNINITIALIZED = "uninitialized"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    DISCARDED = "discarded"


# States in which the draft may no longer change
TERMINAL_STATES = frozenset({DraftState.SUBMITTED, DraftState.DISCARDED})


@dataclass
class AccessKeyDraft:
    """Unpersisted access key fields plus the mode they were opened in."""

    mode: DraftMode
    server_id: int | None = None
    name: str = ""
    data_limit: int | None = None
    data_limit_unit: DataLimitUnit = DEFAULT_DATA_LIMIT_UNIT
    expires_at: datetime | None = None
    source_id: int | None = None
    opened_at: datetime | None = field(default=None, compare=False)

    def __post_init__(self):
        """Ensure the mode and the source record agree."""
        if self.mode == DraftMode.EDIT and self.source_id is None:
            raise ValueError("Edit drafts require the id of the record being edited")
        if self.mode == DraftMode.CREATE and self.source_id is not None:
            raise ValueError("Create drafts cannot reference an existing record")
        if self.data_limit_unit is None:
            raise ValueError("Data limit unit is required")

    @classmethod
    def blank(cls, opened_at: datetime | None = None) -> "AccessKeyDraft":
        return cls(mode=DraftMode.CREATE, opened_at=opened_at)

    @classmethod
    def from_record(
        cls, record: AccessKeyRecord, opened_at: datetime | None = None
    ) -> "AccessKeyDraft":
        """Seed a draft with the stored values, copied verbatim."""
        data_limit, data_limit_unit = seed_unit_and_magnitude(record)
        return cls(
            mode=DraftMode.EDIT,
            server_id=record.server_id,
            name=record.name,
            data_limit=data_limit,
            data_limit_unit=data_limit_unit,
            expires_at=as_utc(record.expires_at) if record.expires_at else None,
            source_id=record.id,
            opened_at=opened_at,
        )

    @property
    def has_data_limit(self) -> bool:
        return self.data_limit is not None
