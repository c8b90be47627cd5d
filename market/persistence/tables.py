"""SQLAlchemy table definitions for the marketplace.

Content and vendor tables (posts, vendors, vendor_services, reviews,
inquiries) are owned by the hosted store and declared here only for
querying. ``post_engagement``, ``reports`` and ``moderation_queue`` are
created by this service's Alembic migration.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (feed content, read-only here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False),  # Author
    Column("like_count", Integer, nullable=True, server_default="0"),
    Column("comment_count", Integer, nullable=True, server_default="0"),
    Column("view_count", Integer, nullable=True, server_default="0"),
    Column("moderation_status", String(20), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# POST ENGAGEMENT TABLE (derived scores, one row per post)
# ============================================================================
post_engagement_table = Table(
    "post_engagement",
    metadata,
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("engagement_score", Float, nullable=False, server_default="0"),
    Column("likes_weight", Float, nullable=False, server_default="0"),
    Column("comments_weight", Float, nullable=False, server_default="0"),
    Column("views_weight", Float, nullable=False, server_default="0"),
    Column("shares_count", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("shares_count >= 0", name="shares_count_non_negative"),
)

Index("idx_post_engagement_score", post_engagement_table.c.engagement_score)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("reporter_id", UUID(as_uuid=True), nullable=False),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reason", String(50), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("reporter_id", "post_id", name="uq_reports_reporter_post"),
    CheckConstraint(
        "reason IN ('spam', 'harassment', 'inappropriate', 'violence', "
        "'misinformation', 'other')",
        name="report_reason_valid",
    ),
    CheckConstraint("char_length(description) <= 500", name="description_length"),
)

Index(
    "idx_reports_reporter_created",
    reports_table.c.reporter_id,
    reports_table.c.created_at,
)
Index("idx_reports_post_status", reports_table.c.post_id, reports_table.c.status)

# ============================================================================
# MODERATION QUEUE TABLE
# ============================================================================
moderation_queue_table = Table(
    "moderation_queue",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("flagged_reason", String(255), nullable=False),
    Column("confidence_score", Float, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_moderation_queue_post_id", moderation_queue_table.c.post_id)

# ============================================================================
# VENDORS TABLE (vendor profiles, read-only here)
# ============================================================================
vendors_table = Table(
    "vendors",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("business_name", String(255), nullable=False),
    Column("rating", Numeric(3, 2), nullable=True),
    Column("total_reviews", Integer, nullable=True),
    Column("response_time_hours", Float, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
)

# ============================================================================
# VENDOR SERVICES TABLE
# ============================================================================
vendor_services_table = Table(
    "vendor_services",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "vendor_id",
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column("category", String(100), nullable=True),
    Column("base_price", Numeric(12, 2), nullable=False),
    Column("is_available", Boolean, nullable=False, server_default="true"),
)

Index("idx_vendor_services_vendor_id", vendor_services_table.c.vendor_id)

# ============================================================================
# REVIEWS TABLE
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "vendor_id",
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("rating", Integer, nullable=False),
    Column("comment", Text, nullable=True),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reviews_vendor_created", reviews_table.c.vendor_id, reviews_table.c.created_at)

# ============================================================================
# INQUIRIES TABLE (source of vendor acceptance rates)
# ============================================================================
inquiries_table = Table(
    "inquiries",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "vendor_id",
        UUID(as_uuid=True),
        ForeignKey("vendors.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_inquiries_vendor_id", inquiries_table.c.vendor_id)
