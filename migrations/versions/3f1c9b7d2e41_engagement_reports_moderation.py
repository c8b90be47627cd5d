"""engagement_reports_moderation

Create the tables owned by this service:
- post_engagement (derived engagement scores and share counter per post)
- reports (content reports, one per reporter per post)
- moderation_queue (posts flagged for staff review)

Revision ID: 3f1c9b7d2e41
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9b7d2e41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POST ENGAGEMENT
    # ========================================================================
    op.create_table(
        "post_engagement",
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("engagement_score", sa.Float(), server_default="0", nullable=False),
        sa.Column("likes_weight", sa.Float(), server_default="0", nullable=False),
        sa.Column("comments_weight", sa.Float(), server_default="0", nullable=False),
        sa.Column("views_weight", sa.Float(), server_default="0", nullable=False),
        sa.Column("shares_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("shares_count >= 0", name="shares_count_non_negative"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id"),
    )
    op.create_index(
        "idx_post_engagement_score", "post_engagement", ["engagement_score"]
    )

    # ========================================================================
    # REPORTS
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("reporter_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("reason", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status", sa.String(length=20), server_default="pending", nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "reason IN ('spam', 'harassment', 'inappropriate', 'violence', "
            "'misinformation', 'other')",
            name="report_reason_valid",
        ),
        sa.CheckConstraint(
            "char_length(description) <= 500", name="description_length"
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "reporter_id", "post_id", name="uq_reports_reporter_post"
        ),
    )
    op.create_index(
        "idx_reports_reporter_created", "reports", ["reporter_id", "created_at"]
    )
    op.create_index("idx_reports_post_status", "reports", ["post_id", "status"])

    # ========================================================================
    # MODERATION QUEUE
    # ========================================================================
    op.create_table(
        "moderation_queue",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("post_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("flagged_reason", sa.String(length=255), nullable=False),
        sa.Column("confidence_score", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_moderation_queue_post_id", "moderation_queue", ["post_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_moderation_queue_post_id", table_name="moderation_queue")
    op.drop_table("moderation_queue")

    op.drop_index("idx_reports_post_status", table_name="reports")
    op.drop_index("idx_reports_reporter_created", table_name="reports")
    op.drop_table("reports")

    op.drop_index("idx_post_engagement_score", table_name="post_engagement")
    op.drop_table("post_engagement")
