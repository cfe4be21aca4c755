"""Draft lifecycle for creating and editing access keys."""

from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

import structlog

from src.core.base import BaseService
from src.core.constants import EDIT_ACCESS_KEY_TITLE, NEW_ACCESS_KEY_TITLE
from src.core.context import EditingSessionContext
from src.core.exceptions import DraftStateError
from src.core.messages import CollaboratorResult
from .collaborators import AccessKeyStore, CompletionCallback, SubmissionOutcome
from .draft import TERMINAL_STATES, AccessKeyDraft, DraftMode, DraftState
from .quota import DataLimitUnit, coerce_unit, is_magnitude_in_range, to_canonical_bytes
from .schemas import (
    AccessKeyRecord,
    DraftField,
    DraftValidationFailure,
    EditAccessKeyRequest,
    FieldError,
    FinalizedRequest,
    NewAccessKeyRequest,
)
from .validators import (
    as_utc,
    parse_data_limit,
    validate_data_limit,
    validate_data_limit_unit,
    validate_expires_at,
    validate_name,
    validate_server_id,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccessKeyDraftController(BaseService):
    """Owns one editing session and is the only producer of finalized requests.

    Field setters never raise for bad input; they record a per-field error
    and return ``False`` so the caller can highlight the field. Calls that
    make no sense in the current state (editing a submitted draft, a second
    ``finalize()`` while one is in flight) raise ``DraftStateError``.
    """

    def __init__(
        self,
        store: AccessKeyStore,
        on_complete: CompletionCallback | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        super().__init__(store)
        self.on_complete = on_complete
        self._clock = clock or _utcnow
        self.state = DraftState.UNINITIALIZED
        self.draft: AccessKeyDraft | None = None
        self.source: AccessKeyRecord | None = None
        self.default_server_id: int | None = None
        self.field_errors: dict[DraftField, FieldError] = {}
        self.submission_error: CollaboratorResult | None = None
        self.is_dirty = False
        self.session_id: str | None = None
        # Set while the last unit selection was rejected; cleared by a valid one
        self._rejected_unit_error: FieldError | None = None

    # Session lifecycle

    def open(self, context: EditingSessionContext) -> AccessKeyDraft:
        """Start a session from the host's context."""
        return self.initialize(
            context.mode,
            source=context.access_key,
            default_server_id=context.default_server_id,
        )

    def initialize(
        self,
        mode: DraftMode | str,
        source: AccessKeyRecord | None = None,
        default_server_id: int | None = None,
    ) -> AccessKeyDraft:
        """Replace the current draft with a fresh one.

        Create drafts start blank with a ``Bytes`` unit; edit drafts copy the
        record's fields verbatim. Nothing from a previous draft is kept.
        """
        if self.state == DraftState.SUBMITTING:
            raise DraftStateError("initialize", self.state.value)

        mode = DraftMode(mode)
        if mode == DraftMode.EDIT and source is None:
            raise ValueError("Edit sessions require the access key being edited")
        if mode == DraftMode.CREATE and source is not None:
            raise ValueError("Create sessions cannot be seeded from an access key")

        opened_at = self.now()
        if source is not None:
            self.draft = AccessKeyDraft.from_record(source, opened_at=opened_at)
        else:
            self.draft = AccessKeyDraft.blank(opened_at=opened_at)

        self.source = source
        self.default_server_id = default_server_id
        self.field_errors = {}
        self._rejected_unit_error = None
        self.submission_error = None
        self.is_dirty = False
        self.session_id = uuid4().hex
        self.state = DraftState.EDITING

        self.logger.info(
            f"Opened {mode.value.lower()} session for access key",
            session_id=self.session_id,
            source_id=self.draft.source_id,
        )
        return self.draft

    def discard(self) -> None:
        """Drop the draft without touching persisted state.

        During a submission this only drops the local draft; the in-flight
        collaborator call still completes.
        """
        if self.state == DraftState.UNINITIALIZED:
            raise DraftStateError("discard", self.state.value)
        if self.state in TERMINAL_STATES:
            self.logger.debug(
                f"Ignoring discard of {self.state.value} draft",
                session_id=self.session_id,
            )
            return

        if self.state == DraftState.SUBMITTING:
            self.logger.warning(
                "Draft discarded while a submission is in flight",
                session_id=self.session_id,
            )
        self.state = DraftState.DISCARDED
        self.draft = None
        self.field_errors = {}
        self.logger.info("Discarded access key draft", session_id=self.session_id)

    # Field setters

    def set_name(self, value: str) -> bool:
        draft = self._editable_draft("set name")
        draft.name = value
        self.is_dirty = True
        return self._record(DraftField.NAME, validate_name(value))

    def set_data_limit(self, value: int | str | None) -> bool:
        """Set the data limit in the currently selected unit.

        Blank text clears the limit. Rejected input is kept on the draft so a
        later ``finalize()`` still reports it.
        """
        draft = self._editable_draft("set data limit")
        data_limit = parse_data_limit(value)
        draft.data_limit = data_limit
        self.is_dirty = True
        return self._record(DraftField.DATA_LIMIT, validate_data_limit(data_limit))

    def set_data_limit_unit(self, unit: DataLimitUnit | str) -> bool:
        """Change the unit; the entered number is reinterpreted, not rescaled.

        An unknown unit leaves the previous one on the draft, and the draft
        stays invalid until a known unit is selected.
        """
        draft = self._editable_draft("set data limit unit")
        try:
            draft.data_limit_unit = coerce_unit(unit)
        except ValueError:
            self._rejected_unit_error = validate_data_limit_unit(unit)
            return self._record(DraftField.DATA_LIMIT_UNIT, self._rejected_unit_error)
        self._rejected_unit_error = None
        self.is_dirty = True
        return self._record(DraftField.DATA_LIMIT_UNIT, None)

    def set_expires_at(self, instant: datetime | None) -> bool:
        draft = self._editable_draft("set expiration")
        draft.expires_at = as_utc(instant) if instant is not None else None
        self.is_dirty = True
        return self._record(
            DraftField.EXPIRES_AT, validate_expires_at(draft.expires_at, self.now())
        )

    # Validation and submission

    def validate(self) -> dict[DraftField, FieldError]:
        """Check every field against the current time."""
        draft = self._current_draft("validate")
        checks = (
            validate_server_id(self._server_id(draft)),
            validate_name(draft.name),
            validate_data_limit(draft.data_limit),
            self._rejected_unit_error
            or validate_data_limit_unit(draft.data_limit_unit),
            validate_expires_at(draft.expires_at, self.now()),
        )
        self.field_errors = {error.field: error for error in checks if error}
        return dict(self.field_errors)

    def build_request(self) -> FinalizedRequest | DraftValidationFailure:
        """Assemble the request for the store, or the field errors preventing it."""
        draft = self._current_draft("build request")
        errors = self.validate()
        if errors:
            return DraftValidationFailure(errors=list(errors.values()))

        fields = {
            "server_id": self._server_id(draft),
            "name": draft.name,
            "data_limit": draft.data_limit,
            "data_limit_unit": draft.data_limit_unit,
            "expires_at": draft.expires_at,
        }
        if draft.mode == DraftMode.EDIT:
            return EditAccessKeyRequest(id=draft.source_id, **fields)
        return NewAccessKeyRequest(**fields)

    async def finalize(self) -> SubmissionOutcome:
        """Validate the draft and hand it to the store exactly once.

        Collaborator failures are returned as-is and the session goes back to
        editing with the entered data intact; nothing is retried. A call that
        completes after the session was discarded or reopened still notifies
        the host but leaves the current session untouched.
        """
        if self.state != DraftState.EDITING:
            raise DraftStateError("finalize", self.state.value)
        self.state = DraftState.SUBMITTING
        self.submission_error = None
        session_id = self.session_id

        with structlog.contextvars.bound_contextvars(session_id=session_id):
            request = self.build_request()
            if isinstance(request, DraftValidationFailure):
                self.state = DraftState.EDITING
                self.logger.info(
                    "Access key draft failed validation",
                    fields=sorted(field.value for field in request.fields),
                )
                return SubmissionOutcome(validation=request)

            try:
                result = await self._send(request)
            except Exception as e:
                if self._is_submitting(session_id):
                    self.state = DraftState.EDITING
                self.logger.error(f"Access key store raised: {e}")
                raise

            outcome = SubmissionOutcome(request=request, result=result)
            if not self._is_submitting(session_id):
                self.logger.info(
                    f"Submission finished after its session ended: "
                    f"{result.message_code.value}",
                    current_session_id=self.session_id,
                )
            elif result.ok:
                self.state = DraftState.SUBMITTED
                self.logger.info(f"Access key saved: {result.message_code.value}")
            else:
                self.state = DraftState.EDITING
                self.submission_error = result
                self.logger.warning(
                    f"Access key store rejected request: {result.message_code.value}",
                    details=result.details,
                )

            if self.on_complete is not None:
                self.on_complete(outcome)
            return outcome

    def _is_submitting(self, session_id: str | None) -> bool:
        return self.session_id == session_id and self.state == DraftState.SUBMITTING

    async def _send(self, request: FinalizedRequest) -> CollaboratorResult:
        if isinstance(request, EditAccessKeyRequest):
            return await self.store.update_access_key(request)
        return await self.store.create_access_key(request)

    # Presentation helpers

    @property
    def mode(self) -> DraftMode | None:
        return self.draft.mode if self.draft is not None else None

    @property
    def title(self) -> str:
        if self.source is not None:
            return EDIT_ACCESS_KEY_TITLE.format(name=self.source.name)
        return NEW_ACCESS_KEY_TITLE

    @property
    def is_busy(self) -> bool:
        """True from submission until the host closes the session."""
        return self.state in (DraftState.SUBMITTING, DraftState.SUBMITTED)

    @property
    def data_limit_bytes(self) -> int | None:
        """Current data limit in bytes, for display only."""
        if self.draft is None or not is_magnitude_in_range(self.draft.data_limit):
            return None
        return to_canonical_bytes(self.draft.data_limit, self.draft.data_limit_unit)

    def min_expires_at(self) -> datetime:
        """Earliest expiration the picker should offer."""
        return self.now()

    def now(self) -> datetime:
        return as_utc(self._clock())

    # Internals

    def _server_id(self, draft: AccessKeyDraft) -> int | None:
        if draft.server_id is not None:
            return draft.server_id
        return self.default_server_id

    def _current_draft(self, operation: str) -> AccessKeyDraft:
        if self.draft is None:
            raise DraftStateError(operation, self.state.value)
        return self.draft

    def _editable_draft(self, operation: str) -> AccessKeyDraft:
        if self.state != DraftState.EDITING or self.draft is None:
            raise DraftStateError(operation, self.state.value)
        return self.draft

    def _record(self, field: DraftField, error: FieldError | None) -> bool:
        if error is None:
            self.field_errors.pop(field, None)
            return True
        self.field_errors[field] = error
        return False
