"""PostgreSQL implementation of Vendor repository."""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

import logfire
from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Vendor, VendorService
from market.domain.repository import VendorRepository
from market.domain.value import VendorId
from market.persistence.mappers import row_to_vendor, row_to_vendor_service
from market.persistence.tables import (
    inquiries_table,
    vendor_services_table,
    vendors_table,
)


class PostgresVendorRepository(VendorRepository):
    """PostgreSQL implementation of VendorRepository.

    Acceptance rates are derived from inquiry outcomes: accepted inquiries as
    a percentage of answered (non-pending) ones.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vendor_id: VendorId) -> Optional[Vendor]:
        """Find a vendor by ID, including its services."""
        stmt = select(vendors_table).where(vendors_table.c.id == vendor_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        vendors = await self._hydrate([row._asdict()])
        return vendors[0]

    async def find_active(self) -> List[Vendor]:
        """Find all active vendors, including their services."""
        with logfire.span("vendor_repository.find_active"):
            stmt = select(vendors_table).where(vendors_table.c.is_active.is_(True))
            result = await self.session.execute(stmt)
            return await self._hydrate([row._asdict() for row in result.fetchall()])

    async def _hydrate(self, rows: Sequence[Dict]) -> List[Vendor]:
        """Attach services and acceptance rates to vendor rows (batch queries)."""
        if not rows:
            return []

        vendor_ids = [row["id"] for row in rows]

        services_stmt = select(vendor_services_table).where(
            vendor_services_table.c.vendor_id.in_(vendor_ids)
        )
        services_result = await self.session.execute(services_stmt)
        services: Dict[VendorId, List[VendorService]] = defaultdict(list)
        for service_row in services_result.fetchall():
            services[service_row.vendor_id].append(
                row_to_vendor_service(service_row._asdict())
            )

        answered = func.count().filter(inquiries_table.c.status != "pending")
        accepted = func.count().filter(inquiries_table.c.status == "accepted")
        rates_stmt = (
            select(
                inquiries_table.c.vendor_id,
                case(
                    (answered > 0, accepted * 100.0 / answered),
                    else_=None,
                ).label("acceptance_rate"),
            )
            .where(inquiries_table.c.vendor_id.in_(vendor_ids))
            .group_by(inquiries_table.c.vendor_id)
        )
        rates_result = await self.session.execute(rates_stmt)
        rates = {
            row.vendor_id: (
                float(row.acceptance_rate) if row.acceptance_rate is not None else None
            )
            for row in rates_result.fetchall()
        }

        return [
            row_to_vendor(
                row,
                services=services.get(row["id"], []),
                acceptance_rate=rates.get(row["id"]),
            )
            for row in rows
        ]
