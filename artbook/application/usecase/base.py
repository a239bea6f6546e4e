"""Base use case and shared response model."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from artbook.domain.error import NotFoundError


class ApiModel(BaseModel):
    """Model serialized with camelCase keys on the wire.

    Accepts both the snake_case field names and the camelCase aliases on
    input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, resource: str) -> UUID:
    """Parse an identifier from a path or body.

    A malformed identifier cannot match any row, so it reads as not found.

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, str(value)) from None
