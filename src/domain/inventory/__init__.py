"""Inventory domain module - per-source stock snapshots"""

from .models import SourceItem, SourceItemStatus
from .ports import SourceItemLookupPort

__all__ = [
    "SourceItem",
    "SourceItemStatus",
    "SourceItemLookupPort",
]
