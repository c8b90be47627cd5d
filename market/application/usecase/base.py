"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from market.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str | None, field: str) -> UUID:
    """Parse a raw identifier from a request.

    Raises:
        ValidationError: If the value is missing or not a UUID
    """
    if not value:
        raise ValidationError(f"{field} is required")
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}")
