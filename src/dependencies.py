"""FastAPI dependencies wiring quote validation rules to their adapters."""

from fastapi import Depends
from sqlalchemy.orm import Session

from config import get_settings
from database import get_db
from domain.quote.delivery import ShippingMethodPickupDeliveryCheck
from domain.validation.engine import QuoteValidationEngine
from domain.validation.models import ValidationResultFactory
from domain.validation.rules import InStorePickupSourceStockRule
from infrastructure.repositories import (
    PickupLocationRepository,
    SourceItemRepository,
    StoreRepository,
)


def get_quote_validation_engine(db: Session = Depends(get_db)) -> QuoteValidationEngine:
    """Build the quote validation engine for the current request.

    Args:
        db: Request-scoped database session

    Returns:
        QuoteValidationEngine running all quote validation rules
    """
    settings = get_settings()

    pickup_stock_rule = InStorePickupSourceStockRule(
        validation_result_factory=ValidationResultFactory(),
        pickup_delivery_check=ShippingMethodPickupDeliveryCheck(
            settings.IN_STORE_PICKUP_SHIPPING_METHOD
        ),
        pickup_locations=PickupLocationRepository(db),
        website_resolver=StoreRepository(db),
        source_items=SourceItemRepository(db),
    )

    return QuoteValidationEngine(rules=[pickup_stock_rule])
