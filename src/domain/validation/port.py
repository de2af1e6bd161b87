"""QuoteValidationRulePort interface (Hexagonal Architecture)"""

from abc import ABC, abstractmethod

from ..quote.models import Quote
from .models import ValidationResult


class QuoteValidationRulePort(ABC):
    """Port interface for quote validation rules.

    Rules are aggregated by QuoteValidationEngine. Each rule returns a list
    of results so composite rules can contribute more than one result.
    """

    @abstractmethod
    def validate(self, quote: Quote) -> list[ValidationResult]:
        """Validate a quote.

        Args:
            quote: Quote snapshot to validate (never mutated)

        Returns:
            List of ValidationResult objects
        """
        pass
