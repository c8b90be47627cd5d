"""Domain layer errors.

Every error carries a machine-readable ``code`` so callers can tell policy
rejections (rate limited, duplicate, self-report) apart from invalid input.
"""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    code: ClassVar[str] = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input, rejected before any store access."""

    code = "invalid_input"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class BusinessRuleViolationError(DomainError):
    """Request was well-formed but violates a policy."""

    code = "policy_violation"


class RateLimitExceededError(BusinessRuleViolationError):
    """Reporter exceeded the number of reports allowed per window."""

    code = "rate_limited"

    def __init__(self, limit: int, window_seconds: int, retry_after: int):
        self.limit = limit
        self.window_seconds = window_seconds
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. You can only submit {limit} reports per hour."
            if window_seconds == 3600
            else f"Rate limit exceeded. You can only submit {limit} reports "
            f"per {window_seconds} seconds."
        )


class DuplicateReportError(BusinessRuleViolationError):
    """Reporter already reported this post."""

    code = "duplicate_report"

    def __init__(self) -> None:
        super().__init__("You have already reported this post")


class SelfReportError(BusinessRuleViolationError):
    """Reporter tried to report their own post."""

    code = "self_report"

    def __init__(self) -> None:
        super().__init__("You cannot report your own posts")


class StoreUnavailableError(DomainError):
    """The record store could not serve a query needed to start an operation."""

    code = "store_unavailable"
