"""In-memory vendor repository for testing."""

from typing import Optional

from market.domain.model.vendor import Vendor
from market.domain.repository.vendor import VendorRepository
from market.domain.value import VendorId


class InMemoryVendorRepository(VendorRepository):
    """In-memory implementation of VendorRepository for testing."""

    def __init__(self) -> None:
        self._vendors: dict[VendorId, Vendor] = {}

    async def find_by_id(self, vendor_id: VendorId) -> Optional[Vendor]:
        """Find a vendor by ID."""
        return self._vendors.get(vendor_id)

    async def find_active(self) -> list[Vendor]:
        """Find all active vendors."""
        return [v for v in self._vendors.values() if v.is_active]

    async def save(self, vendor: Vendor) -> Vendor:
        """Save a vendor."""
        self._vendors[vendor.id] = vendor
        return vendor
