"""Strongly typed identifiers for marketplace domain entities.

NewType keeps post, vendor and user ids from being mixed up while staying
plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
ReportId = NewType("ReportId", UUID)
ModerationEntryId = NewType("ModerationEntryId", UUID)
VendorId = NewType("VendorId", UUID)
VendorServiceId = NewType("VendorServiceId", UUID)
ReviewId = NewType("ReviewId", UUID)
