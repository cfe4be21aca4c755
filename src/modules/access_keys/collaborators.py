"""Boundary contracts between the draft controller and its host."""

from dataclasses import dataclass
from typing import Callable, Protocol

from src.core.messages import CollaboratorResult
from .schemas import (
    DraftValidationFailure,
    EditAccessKeyRequest,
    FinalizedRequest,
    NewAccessKeyRequest,
)


class AccessKeyStore(Protocol):
    """Persistence layer for access keys.

    Both calls are single-shot: failures come back as a result with
    ``ok=False`` and are never retried by the caller.
    """

    async def create_access_key(
        self, request: NewAccessKeyRequest
    ) -> CollaboratorResult: ...

    async def update_access_key(
        self, request: EditAccessKeyRequest
    ) -> CollaboratorResult: ...


@dataclass(frozen=True)
class SubmissionOutcome:
    """What a single submission attempt produced."""

    request: FinalizedRequest | None = None
    validation: DraftValidationFailure | None = None
    result: CollaboratorResult | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None and self.result.ok

    @property
    def error(self) -> DraftValidationFailure | CollaboratorResult | None:
        if self.validation is not None:
            return self.validation
        if self.result is not None and not self.result.ok:
            return self.result
        return None


# Session host hook, called after every collaborator call
CompletionCallback = Callable[[SubmissionOutcome], None]
