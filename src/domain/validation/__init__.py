"""Validation domain module.

Implements the quote validation engine and the rules it runs before a
quote can be submitted as an order.
"""

from .models import ValidationResult, ValidationResultFactory
from .port import QuoteValidationRulePort
from .engine import QuoteValidationEngine
from .rules import InStorePickupSourceStockRule

__all__ = [
    "ValidationResult",
    "ValidationResultFactory",
    "QuoteValidationRulePort",
    "QuoteValidationEngine",
    "InStorePickupSourceStockRule",
]
