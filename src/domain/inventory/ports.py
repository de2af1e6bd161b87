"""SourceItemLookupPort interface (Hexagonal Architecture)"""

from abc import ABC, abstractmethod
from typing import Sequence

from .models import SourceItem


class SourceItemLookupPort(ABC):
    """Port interface for reading per-source stock of a SKU."""

    @abstractmethod
    def get_source_items(self, sku: str, source_codes: Sequence[str]) -> list[SourceItem]:
        """Get source items for a SKU restricted to the given sources.

        Args:
            sku: Product SKU
            source_codes: Source codes to include

        Returns:
            List of SourceItem snapshots, possibly empty
        """
        pass
