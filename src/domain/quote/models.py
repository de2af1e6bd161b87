"""Quote (shopping cart) domain models"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class QuoteItem:
    """A single line item of a quote."""
    sku: str
    name: str
    qty: Decimal = Decimal("0")


@dataclass(frozen=True)
class QuoteAddress:
    """Shipping address of a quote.

    Attributes:
        shipping_method: Selected shipping method code (e.g. 'instore_pickup')
        pickup_location_code: Pickup location assigned to the address. None means
            the quote is not a pickup delivery or the location is not resolved yet.
    """
    shipping_method: Optional[str] = None
    pickup_location_code: Optional[str] = None


@dataclass(frozen=True)
class Quote:
    """Snapshot of a shopping cart prior to order placement."""
    store_id: int
    shipping_address: Optional[QuoteAddress] = None
    items: tuple[QuoteItem, ...] = field(default_factory=tuple)
    id: Optional[str] = None
