"""Vendor matching models.

Event requirements are the consumer's input to vendor discovery; match
results are computed per vendor per query and never persisted.
"""

from typing import Optional

from pydantic import Field

from market.domain.value import BudgetHealth, BudgetRange, ServiceType, VendorId
from market.domain.value.common import ValueObject


class EventRequirements(ValueObject):
    """What a consumer needs for an event."""

    budget: BudgetRange
    service_types: list[ServiceType] = Field(default_factory=list)
    event_type: Optional[str] = None  # e.g. 'wedding', 'birthday'
    location: Optional[str] = None


class MatchScoreResult(ValueObject):
    """Vendor suitability for an event.

    Reasons are ordered by impact: the criterion that contributed the most
    points comes first.
    """

    score: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)


class VendorMatch(ValueObject):
    """A vendor together with its match result, used for ranked listings."""

    vendor_id: VendorId
    business_name: str
    score: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)


class BudgetHealthAssessment(ValueObject):
    """How a consumer's budget compares with typical spend for the event type."""

    status: BudgetHealth
    label: str
    description: str
