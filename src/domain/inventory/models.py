"""Inventory source item models"""

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any


class SourceItemStatus(IntEnum):
    """Stock status of a SKU at a source."""
    DISABLED = 0
    ENABLED = 1

    @classmethod
    def from_raw(cls, value: Any) -> "SourceItemStatus":
        """Decode a raw stored status. Anything other than 1 is disabled."""
        try:
            return cls.ENABLED if int(value) == cls.ENABLED else cls.DISABLED
        except (TypeError, ValueError):
            return cls.DISABLED


@dataclass(frozen=True)
class SourceItem:
    """Read-only snapshot of a SKU's stock at one inventory source."""
    sku: str
    source_code: str
    quantity: Decimal
    status: SourceItemStatus

    @property
    def is_enabled(self) -> bool:
        return self.status is SourceItemStatus.ENABLED
