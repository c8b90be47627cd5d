"""Vendor and vendor service entities.

Vendor attributes come straight from vendor-managed profiles and historical
inquiry data, so numeric fields are accepted as stored. Match scoring treats
missing or out-of-range values as giving no credit rather than failing.
"""

from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import VendorId, VendorServiceId


class VendorService(DomainModel):
    """A priced service a vendor offers (e.g. 'Wedding Photography')."""

    id: VendorServiceId
    name: str
    category: Optional[str] = None  # Category slug, e.g. 'photography'
    base_price: float
    is_available: bool = True


class Vendor(DomainModel):
    """Vendor profile as seen by discovery and matching."""

    id: VendorId
    business_name: str
    rating: Optional[float] = None  # Average review rating, 0-5
    total_reviews: Optional[int] = None
    response_time_hours: Optional[float] = None  # Typical first-reply time
    acceptance_rate: Optional[float] = None  # Percent of inquiries accepted, 0-100
    is_active: bool = True
    services: list[VendorService] = Field(default_factory=list)
