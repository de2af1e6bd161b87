"""Pickup domain module - pickup locations and sales channel scoping"""

from .models import PickupLocation, SalesChannelType
from .ports import PickupLocationPort

__all__ = [
    "PickupLocation",
    "SalesChannelType",
    "PickupLocationPort",
]
