"""Quote validation rule implementations.

Each rule implements QuoteValidationRulePort and returns ValidationResult
objects carrying human-readable error messages.
"""

from .pickup_stock_rules import (
    InStorePickupSourceStockRule,
    MISSING_PICKUP_LOCATION_MESSAGE,
    NO_STOCKS_MESSAGE,
    INSUFFICIENT_STOCK_MESSAGE,
)

__all__ = [
    "InStorePickupSourceStockRule",
    "MISSING_PICKUP_LOCATION_MESSAGE",
    "NO_STOCKS_MESSAGE",
    "INSUFFICIENT_STOCK_MESSAGE",
]
