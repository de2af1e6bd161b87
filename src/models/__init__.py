"""SQLAlchemy models for store scopes and inventory"""

from .base import Base
from .store import Website, Store
from .inventory import (
    InventorySource,
    InventorySourceItem,
    InventoryStock,
    InventorySourceStockLink,
    InventoryStockSalesChannel,
)

__all__ = [
    "Base",
    "Website",
    "Store",
    "InventorySource",
    "InventorySourceItem",
    "InventoryStock",
    "InventorySourceStockLink",
    "InventoryStockSalesChannel",
]
