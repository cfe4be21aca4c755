"""Session context supplied by the host that opens an access key editor."""

from dataclasses import dataclass

from src.modules.access_keys.draft import DraftMode
from src.modules.access_keys.schemas import AccessKeyRecord


@dataclass
class EditingSessionContext:
    """Context containing the default server and the record being edited, if any."""

    default_server_id: int
    access_key: AccessKeyRecord | None = None

    def __post_init__(self):
        """Ensure the session points at a server."""
        if self.default_server_id is None:
            raise ValueError("Default server id is required in session context")

    @property
    def mode(self) -> DraftMode:
        return DraftMode.EDIT if self.access_key is not None else DraftMode.CREATE
