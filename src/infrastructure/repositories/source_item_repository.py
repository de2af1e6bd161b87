"""Source item repository for per-source stock lookups"""

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from domain.inventory.models import SourceItem, SourceItemStatus
from domain.inventory.ports import SourceItemLookupPort
from models.inventory import InventorySourceItem


class SourceItemRepository(SourceItemLookupPort):
    """Repository for inventory_source_item reads.

    Raw stored status values are decoded to SourceItemStatus here so the
    domain never sees the integer encoding.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def get_source_items(self, sku: str, source_codes: Sequence[str]) -> list[SourceItem]:
        """Get source items for a SKU at the given sources.

        Args:
            sku: Product SKU
            source_codes: Source codes to include

        Returns:
            SourceItem snapshots ordered by source_item_id
        """
        if not source_codes:
            return []

        query = (
            select(InventorySourceItem)
            .where(
                and_(
                    InventorySourceItem.sku == sku,
                    InventorySourceItem.source_code.in_(list(source_codes))
                )
            )
            .order_by(InventorySourceItem.source_item_id)
        )

        return [
            SourceItem(
                sku=row.sku,
                source_code=row.source_code,
                quantity=Decimal(str(row.quantity)),
                status=SourceItemStatus.from_raw(row.status),
            )
            for row in self.db.execute(query).scalars().all()
        ]
