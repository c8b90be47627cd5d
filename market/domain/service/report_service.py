"""Report domain service.

Admission control in front of report creation. A submission passes, in
order: input validation, the per-reporter rate limit, the duplicate check
and the self-report check, before it is committed. Rejected submissions are
never stored, so they never count against the rate limit.
"""

import math
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from market.config import ModerationSettings
from market.domain.error import (
    DuplicateReportError,
    NotFoundError,
    RateLimitExceededError,
    SelfReportError,
    ValidationError,
)
from market.domain.model.moderation import ModerationEntry
from market.domain.model.report import Report
from market.domain.repository import (
    ModerationQueueRepository,
    PostRepository,
    ReportRepository,
)
from market.domain.value import (
    ModerationEntryId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)

from .base import Service


class ReportService(Service):
    """Domain service for submitting content reports."""

    def __init__(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        moderation_repository: ModerationQueueRepository,
        settings: ModerationSettings,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            post_repository: Post repository
            moderation_repository: Moderation queue repository
            settings: Moderation settings
        """
        self.report_repository = report_repository
        self.post_repository = post_repository
        self.moderation_repository = moderation_repository
        self.settings = settings

    def validate(
        self,
        post_id: Optional[str],
        reason: Optional[str],
        description: Optional[str],
    ) -> tuple[PostId, ReportReason, Optional[str]]:
        """Validate raw report input.

        Args:
            post_id: Post ID as submitted
            reason: Reason as submitted
            description: Free-text description as submitted

        Returns:
            Typed post ID, reason and trimmed description (None if blank)

        Raises:
            ValidationError: If any field is missing or malformed
        """
        if not post_id:
            raise ValidationError("post_id and reason are required")
        if not reason:
            raise ValidationError("post_id and reason are required")

        try:
            typed_post_id = PostId(UUID(str(post_id)))
        except ValueError:
            raise ValidationError("Invalid post_id")

        try:
            typed_reason = ReportReason(reason)
        except ValueError:
            raise ValidationError("Invalid reason")

        # The limit applies to the text as submitted, before trimming
        if description and len(description) > self.settings.description_max_length:
            raise ValidationError(
                f"Description must be {self.settings.description_max_length} "
                "characters or less"
            )
        trimmed = description.strip() if description else None

        return typed_post_id, typed_reason, trimmed or None

    async def submit_report(
        self,
        reporter_id: UserId,
        post_id: Optional[str],
        reason: Optional[str],
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Report:
        """Run a report through the gate and store it.

        Args:
            reporter_id: Authenticated reporter's ID
            post_id: Post ID as submitted
            reason: Reason as submitted
            description: Optional free-text description
            now: Reference time for the rate-limit window

        Returns:
            The committed report

        Raises:
            ValidationError: Malformed input
            RateLimitExceededError: Too many reports in the window
            DuplicateReportError: Reporter already reported this post
            NotFoundError: Post does not exist
            SelfReportError: Reporter authored the post
        """
        with logfire.span("report_service.submit_report", reporter_id=str(reporter_id)):
            typed_post_id, typed_reason, trimmed = self.validate(
                post_id, reason, description
            )
            now = now or self.now()

            await self._check_rate_limit(reporter_id, now)

            existing = await self.report_repository.find_by_reporter_and_post(
                reporter_id, typed_post_id
            )
            if existing:
                logfire.warn(
                    "Duplicate report attempt",
                    reporter_id=str(reporter_id),
                    post_id=str(typed_post_id),
                )
                raise DuplicateReportError()

            post = await self.post_repository.find_by_id(typed_post_id)
            if post is None:
                logfire.warn("Report on non-existent post", post_id=str(typed_post_id))
                raise NotFoundError("Post", str(typed_post_id))

            if post.author_id == reporter_id:
                logfire.warn(
                    "Self-report attempt",
                    reporter_id=str(reporter_id),
                    post_id=str(typed_post_id),
                )
                raise SelfReportError()

            report = Report(
                id=ReportId(uuid4()),
                reporter_id=reporter_id,
                post_id=typed_post_id,
                reason=typed_reason,
                description=trimmed,
                status=ReportStatus.PENDING,
                created_at=now,
            )

            # A concurrent submission can pass the pre-check; the unique
            # constraint decides
            try:
                saved = await self.report_repository.save(report)
            except IntegrityError:
                logfire.warn(
                    "Duplicate report rejected by store",
                    reporter_id=str(reporter_id),
                    post_id=str(typed_post_id),
                )
                raise DuplicateReportError()

            logfire.info(
                "Report created",
                report_id=str(saved.id),
                post_id=str(typed_post_id),
                reason=typed_reason.value,
            )

            await self._escalate_if_needed(typed_post_id)
            return saved

    async def _check_rate_limit(self, reporter_id: UserId, now: datetime) -> None:
        window = timedelta(seconds=self.settings.rate_limit_window_seconds)
        limit = self.settings.max_reports_per_window

        recent = await self.report_repository.find_by_reporter_since(
            reporter_id, now - window
        )
        if len(recent) < limit:
            return

        # A slot opens once enough reports age out to drop below the limit
        freeing = recent[len(recent) - limit]
        remaining = (freeing.created_at + window - now).total_seconds()
        retry_after = max(1, math.ceil(remaining))

        logfire.warn(
            "Report rate limit exceeded",
            reporter_id=str(reporter_id),
            count=len(recent),
            retry_after=retry_after,
        )
        raise RateLimitExceededError(
            limit=limit,
            window_seconds=self.settings.rate_limit_window_seconds,
            retry_after=retry_after,
        )

    async def _escalate_if_needed(self, post_id: PostId) -> Optional[ModerationEntry]:
        """Queue the post for staff review once it collects enough reports.

        Failures are logged and swallowed: the report is already committed.
        """
        try:
            pending = await self.report_repository.count_pending_for_post(post_id)
            if pending < self.settings.escalation_threshold:
                return None

            queued = await self.moderation_repository.find_by_post(post_id)
            if queued:
                return None

            entry = await self.moderation_repository.enqueue(
                ModerationEntry(
                    id=ModerationEntryId(uuid4()),
                    post_id=post_id,
                    flagged_reason=f"Multiple reports ({pending})",
                    confidence_score=self.settings.escalation_confidence,
                )
            )
            logfire.info(
                "Post escalated to moderation queue",
                post_id=str(post_id),
                pending_reports=pending,
            )
            return entry
        except Exception as e:
            logfire.error(
                "Failed to escalate reported post",
                post_id=str(post_id),
                error=str(e),
                error_type=type(e).__name__,
            )
            return None
