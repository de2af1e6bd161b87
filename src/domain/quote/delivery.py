"""In-store pickup delivery method detection"""

import logging

from .models import Quote
from .ports import PickupDeliveryCheckPort


logger = logging.getLogger(__name__)

IN_STORE_PICKUP_SHIPPING_METHOD = "instore_pickup"


class ShippingMethodPickupDeliveryCheck(PickupDeliveryCheckPort):
    """Treats a quote as pickup delivery when its shipping method is in-store pickup."""

    def __init__(self, pickup_shipping_method: str = IN_STORE_PICKUP_SHIPPING_METHOD):
        self.pickup_shipping_method = pickup_shipping_method

    def is_pickup_delivery_cart(self, quote: Quote) -> bool:
        address = quote.shipping_address
        if address is None or not address.shipping_method:
            return False

        is_pickup = address.shipping_method == self.pickup_shipping_method
        logger.debug(
            f"Quote {quote.id} shipping method '{address.shipping_method}' "
            f"is_pickup={is_pickup}"
        )
        return is_pickup
