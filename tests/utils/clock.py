"""Controllable clock for draft expiration tests."""

from datetime import datetime, timedelta, timezone

FROZEN_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    def __init__(self, now: datetime = FROZEN_NOW):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current
