"""Global test configuration and fixtures for the access key core."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.messages import CollaboratorResult, MessageCode
from src.modules.access_keys.controller import AccessKeyDraftController
from tests.factories import AccessKeyRecordFactory
from tests.utils.clock import FrozenClock


@pytest.fixture
def access_key_factory():
    return AccessKeyRecordFactory


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def access_key_store():
    """Store double whose calls succeed unless a test overrides them."""
    store = MagicMock()
    store.create_access_key = AsyncMock(
        return_value=CollaboratorResult.success(
            MessageCode.ACCESS_KEY_CREATED, access_key_id=101
        )
    )
    store.update_access_key = AsyncMock(
        return_value=CollaboratorResult.success(MessageCode.ACCESS_KEY_UPDATED)
    )
    return store


@pytest.fixture
def completions():
    """Outcomes delivered to the session host."""
    return []


@pytest.fixture
def controller(access_key_store, clock, completions):
    return AccessKeyDraftController(
        access_key_store, on_complete=completions.append, clock=clock
    )
