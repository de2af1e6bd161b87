"""Quote domain module - cart snapshot models and delivery method detection"""

from .models import Quote, QuoteItem, QuoteAddress
from .ports import PickupDeliveryCheckPort, WebsiteResolverPort
from .delivery import ShippingMethodPickupDeliveryCheck, IN_STORE_PICKUP_SHIPPING_METHOD

__all__ = [
    "Quote",
    "QuoteItem",
    "QuoteAddress",
    "PickupDeliveryCheckPort",
    "WebsiteResolverPort",
    "ShippingMethodPickupDeliveryCheck",
    "IN_STORE_PICKUP_SHIPPING_METHOD",
]
