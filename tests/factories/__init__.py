from .access_keys import AccessKeyRecordFactory

__all__ = [
    "AccessKeyRecordFactory",
]
