"""Base factory for pydantic models."""

from typing import Any, TypeVar, Generic

import factory
from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


class PydanticModelFactory(factory.Factory, Generic[T]):
    """Base factory building validated pydantic models."""

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class: type[T], *args: Any, **kwargs: Any) -> T:
        """Build the model through validation, like a loaded record."""
        return model_class.model_validate(kwargs)

    @classmethod
    def _build(cls, model_class: type[T], *args: Any, **kwargs: Any) -> T:
        return cls._create(model_class, *args, **kwargs)
