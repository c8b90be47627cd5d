"""Domain value objects for the marketplace.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator, model_validator

from market.domain.value.common import RootValueObject, ValueObject


class ModerationStatus(str, Enum):
    """Moderation state of a feed post."""

    APPROVED = "approved"
    PENDING = "pending"
    FLAGGED = "flagged"
    REJECTED = "rejected"


class ReportReason(str, Enum):
    """Fixed set of reasons a post can be reported for."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    INAPPROPRIATE = "inappropriate"
    VIOLENCE = "violence"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Status of a report. Transitions are made by moderation staff."""

    PENDING = "pending"
    REVIEWED = "reviewed"


class BudgetHealth(str, Enum):
    """Where a consumer's budget sits relative to market guidance."""

    BELOW = "below"
    ALIGNED = "aligned"
    ABOVE = "above"


class Sentiment(str, Enum):
    """Overall review sentiment for a vendor."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ServiceType(RootValueObject[str]):
    """Requested service type, e.g. 'photography' or 'dj-music'.

    Normalized to lowercase without surrounding whitespace so it can be
    compared against vendor service categories and names.
    """

    @field_validator("root")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Normalize and validate the service type."""
        v = v.strip().lower()
        if not v or len(v) > 100:
            raise ValueError("Service type must be 1-100 characters")
        return v


class BudgetRange(ValueObject):
    """Inclusive budget range for an event, in the marketplace currency."""

    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> "BudgetRange":
        """Minimum must not exceed maximum."""
        if self.min > self.max:
            raise ValueError("Budget minimum cannot exceed budget maximum")
        return self

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2
