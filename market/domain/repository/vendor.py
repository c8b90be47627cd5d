"""Vendor repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from market.domain.model.vendor import Vendor
from market.domain.value import VendorId


class VendorRepository(ABC):
    """Repository for vendor profiles and their services."""

    @abstractmethod
    async def find_by_id(self, vendor_id: VendorId) -> Optional[Vendor]:
        """Find a vendor by ID, including its services.

        Args:
            vendor_id: The vendor's unique identifier

        Returns:
            The vendor if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(self) -> List[Vendor]:
        """Find all active vendors, including their services.

        Returns:
            Active vendors in no particular order
        """
        pass
