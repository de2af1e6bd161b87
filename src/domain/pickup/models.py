"""Pickup location models"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SalesChannelType(str, Enum):
    """Scope under which a pickup location code is resolved"""
    WEBSITE = "website"


@dataclass(frozen=True)
class PickupLocation:
    """A physical location customers can collect orders from.

    The pickup location code equals the code of the inventory source
    backing the location.
    """
    pickup_location_code: str
    name: str
    city: Optional[str] = None
    street: Optional[str] = None
    postcode: Optional[str] = None
    country_id: Optional[str] = None
    phone: Optional[str] = None
