"""Factory for stored AccessKeyRecord snapshots."""

from datetime import timedelta

import factory
from src.modules.access_keys.quota import DataLimitUnit
from src.modules.access_keys.schemas import AccessKeyRecord
from tests.utils.clock import FROZEN_NOW
from .base import PydanticModelFactory


class AccessKeyRecordFactory(PydanticModelFactory[AccessKeyRecord]):
    """Factory for creating AccessKeyRecord instances."""

    class Meta:
        model = AccessKeyRecord

    id = factory.Sequence(lambda n: n + 1)
    server_id = 1
    name = factory.Faker("user_name")
    data_limit = factory.Faker("random_int", min=1, max=500)
    data_limit_unit = DataLimitUnit.GB
    expires_at = factory.LazyFunction(lambda: FROZEN_NOW + timedelta(days=30))

    class Params:
        unlimited = factory.Trait(data_limit=None, data_limit_unit=None)
        without_expiry = factory.Trait(expires_at=None)
