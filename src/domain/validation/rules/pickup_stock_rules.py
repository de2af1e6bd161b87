"""In-store pickup source stock validation rule"""

import logging
from typing import Optional

from domain.inventory.ports import SourceItemLookupPort
from domain.pickup.models import PickupLocation, SalesChannelType
from domain.pickup.ports import PickupLocationPort
from domain.quote.models import Quote, QuoteItem
from domain.quote.ports import PickupDeliveryCheckPort, WebsiteResolverPort
from domain.validation.models import ValidationResult, ValidationResultFactory
from domain.validation.port import QuoteValidationRulePort


logger = logging.getLogger(__name__)

MISSING_PICKUP_LOCATION_MESSAGE = "Quote does not have Pickup Location assigned."
NO_STOCKS_MESSAGE = 'The product "{name}" has no stocks.'
INSUFFICIENT_STOCK_MESSAGE = 'The product "{name}" has insufficient stock in location {location}'


class InStorePickupSourceStockRule(QuoteValidationRulePort):
    """Validate a quote for the in-store pickup delivery method.

    A pickup quote must have a pickup location assigned, and every item
    must have enabled stock at the location's source covering the
    requested quantity. Quotes with any other delivery method pass.

    NoSuchEntityError raised while resolving the pickup location is not
    caught: unknown reference data is a system fault, not a cart problem.
    """

    def __init__(
        self,
        validation_result_factory: ValidationResultFactory,
        pickup_delivery_check: PickupDeliveryCheckPort,
        pickup_locations: PickupLocationPort,
        website_resolver: WebsiteResolverPort,
        source_items: SourceItemLookupPort,
    ):
        self.validation_result_factory = validation_result_factory
        self.pickup_delivery_check = pickup_delivery_check
        self.pickup_locations = pickup_locations
        self.website_resolver = website_resolver
        self.source_items = source_items

    def validate(self, quote: Quote) -> list[ValidationResult]:
        errors: list[str] = []

        if not self.pickup_delivery_check.is_pickup_delivery_cart(quote):
            return [self.validation_result_factory.create(errors)]

        pickup_location = self._get_pickup_location(quote)

        if pickup_location is None:
            errors.append(MISSING_PICKUP_LOCATION_MESSAGE)
        else:
            for item in quote.items:
                errors.extend(self._validate_item(item, pickup_location))

        logger.info(
            f"Pickup stock validation for quote {quote.id}: {len(errors)} errors"
        )

        return [self.validation_result_factory.create(errors)]

    def _get_pickup_location(self, quote: Quote) -> Optional[PickupLocation]:
        """Get the pickup location assigned to the quote's shipping address.

        Returns None when no code is assigned. Raises NoSuchEntityError when
        the code cannot be resolved in the quote's website.
        """
        address = quote.shipping_address
        if address is None or not address.pickup_location_code:
            return None

        return self.pickup_locations.get_pickup_location(
            address.pickup_location_code,
            SalesChannelType.WEBSITE,
            self.website_resolver.get_website_code_by_store_id(int(quote.store_id)),
        )

    def _validate_item(self, item: QuoteItem, pickup_location: PickupLocation) -> list[str]:
        source_items = self.source_items.get_source_items(
            item.sku,
            [pickup_location.pickup_location_code]
        )

        # A missing record is reported once, not also as insufficient stock
        if not source_items:
            logger.debug(
                f"SKU '{item.sku}' has no source item at '{pickup_location.pickup_location_code}'"
            )
            return [NO_STOCKS_MESSAGE.format(name=item.name)]

        source_item = source_items[-1]

        if not source_item.is_enabled or source_item.quantity < item.qty:
            logger.debug(
                f"SKU '{item.sku}' insufficient at '{source_item.source_code}': "
                f"status={source_item.status.name} quantity={source_item.quantity} requested={item.qty}"
            )
            return [INSUFFICIENT_STOCK_MESSAGE.format(name=item.name, location=pickup_location.name)]

        return []
