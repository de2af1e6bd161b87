"""Ports consumed by quote validation (Hexagonal Architecture)"""

from abc import ABC, abstractmethod

from .models import Quote


class PickupDeliveryCheckPort(ABC):
    """Decides whether a quote uses the in-store pickup delivery method."""

    @abstractmethod
    def is_pickup_delivery_cart(self, quote: Quote) -> bool:
        pass


class WebsiteResolverPort(ABC):
    """Resolves the website a store view belongs to."""

    @abstractmethod
    def get_website_code_by_store_id(self, store_id: int) -> str:
        """Get website code for a store.

        Args:
            store_id: Store identifier taken from the quote

        Returns:
            Website code (sales channel code for website-scoped lookups)

        Raises:
            NoSuchEntityError: If the store or its website is unknown
        """
        pass
