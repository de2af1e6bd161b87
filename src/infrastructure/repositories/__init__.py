"""SQLAlchemy adapters for quote validation ports"""

from .store_repository import StoreRepository
from .pickup_location_repository import PickupLocationRepository
from .source_item_repository import SourceItemRepository

__all__ = [
    "StoreRepository",
    "PickupLocationRepository",
    "SourceItemRepository",
]
