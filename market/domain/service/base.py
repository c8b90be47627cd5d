"""Base service class for domain services."""

from datetime import datetime, timezone


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span repositories or entities.
    """

    @staticmethod
    def now() -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        return datetime.now(timezone.utc)
