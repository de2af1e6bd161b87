"""PickupLocationPort interface (Hexagonal Architecture)"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import PickupLocation, SalesChannelType


class PickupLocationPort(ABC):
    """Port interface for resolving pickup locations by code."""

    @abstractmethod
    def get_pickup_location(
        self,
        pickup_location_code: str,
        sales_channel_type: SalesChannelType,
        sales_channel_code: str
    ) -> Optional[PickupLocation]:
        """Resolve a pickup location within a sales channel.

        Args:
            pickup_location_code: Code assigned to the shipping address
            sales_channel_type: Sales channel type (website)
            sales_channel_code: Sales channel code (website code)

        Returns:
            PickupLocation, or None if the location is not available for pickup

        Raises:
            NoSuchEntityError: If the code/sales channel pair is unknown
        """
        pass
