"""Pickup location repository"""

import logging
from typing import Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from domain.exceptions import NoSuchEntityError
from domain.pickup.models import PickupLocation, SalesChannelType
from domain.pickup.ports import PickupLocationPort
from models.inventory import (
    InventorySource,
    InventorySourceStockLink,
    InventoryStockSalesChannel,
)


logger = logging.getLogger(__name__)


class PickupLocationRepository(PickupLocationPort):
    """Resolves pickup locations from inventory sources.

    A pickup location is a source assigned to the stock linked with the
    requested sales channel. The source must be enabled and have pickup
    location mode active to be returned.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def get_pickup_location(
        self,
        pickup_location_code: str,
        sales_channel_type: SalesChannelType,
        sales_channel_code: str
    ) -> Optional[PickupLocation]:
        """Resolve a pickup location within a sales channel.

        Args:
            pickup_location_code: Source code of the pickup location
            sales_channel_type: Sales channel type
            sales_channel_code: Sales channel code

        Returns:
            PickupLocation, or None if the source is disabled or not pickup-active

        Raises:
            NoSuchEntityError: If the sales channel has no stock, or the source
                is not assigned to that stock
        """
        stock_id = self._get_stock_id(sales_channel_type, sales_channel_code)

        query = (
            select(InventorySource)
            .join(
                InventorySourceStockLink,
                InventorySourceStockLink.source_code == InventorySource.source_code
            )
            .where(
                and_(
                    InventorySourceStockLink.stock_id == stock_id,
                    InventorySource.source_code == pickup_location_code
                )
            )
        )
        source = self.db.execute(query).scalar_one_or_none()

        if source is None:
            raise NoSuchEntityError(
                "PickupLocation",
                pickup_location_code,
                f"Can not find Pickup Location with code '{pickup_location_code}' "
                f"for {SalesChannelType(sales_channel_type).value} '{sales_channel_code}'"
            )

        if not source.enabled or not source.is_pickup_location_active:
            logger.debug(
                f"Source '{pickup_location_code}' is not an active pickup location "
                f"(enabled={source.enabled}, pickup_active={source.is_pickup_location_active})"
            )
            return None

        return PickupLocation(
            pickup_location_code=source.source_code,
            name=source.name,
            city=source.city,
            street=source.street,
            postcode=source.postcode,
            country_id=source.country_id,
            phone=source.phone,
        )

    def _get_stock_id(self, sales_channel_type: SalesChannelType, sales_channel_code: str) -> int:
        channel_type = SalesChannelType(sales_channel_type).value
        query = select(InventoryStockSalesChannel.stock_id).where(
            and_(
                InventoryStockSalesChannel.type == channel_type,
                InventoryStockSalesChannel.code == sales_channel_code
            )
        )
        stock_id = self.db.execute(query).scalar_one_or_none()

        if stock_id is None:
            raise NoSuchEntityError(
                "Stock",
                f"{channel_type}:{sales_channel_code}",
                f"No linked stock found for sales channel {channel_type} '{sales_channel_code}'"
            )

        return stock_id
