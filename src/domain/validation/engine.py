"""QuoteValidationEngine - runs quote validation rules and aggregates results"""

import logging
from typing import Sequence

from ..exceptions import QuoteValidationError
from ..quote.models import Quote
from .models import ValidationResult
from .port import QuoteValidationRulePort


logger = logging.getLogger(__name__)


class QuoteValidationEngine(QuoteValidationRulePort):
    """Composite of quote validation rules.

    Runs every rule in order and concatenates their results. Unlike
    business failures, exceptions raised by a rule are not turned into
    messages: they are logged with the rule name and re-raised.
    """

    def __init__(self, rules: Sequence[QuoteValidationRulePort]):
        self.rules = list(rules)

    def validate(self, quote: Quote) -> list[ValidationResult]:
        """Run all validation rules on a quote.

        Args:
            quote: Quote snapshot to validate

        Returns:
            Results of all rules, in rule order
        """
        all_results: list[ValidationResult] = []

        for rule in self.rules:
            rule_name = type(rule).__name__
            try:
                results = rule.validate(quote)
            except Exception:
                logger.error(
                    f"Validation rule '{rule_name}' failed for quote {quote.id}",
                    exc_info=True
                )
                raise

            all_results.extend(results)
            logger.debug(
                f"Validation rule '{rule_name}' produced "
                f"{sum(len(r.errors) for r in results)} errors for quote {quote.id}"
            )

        error_count = sum(len(result.errors) for result in all_results)
        logger.info(
            f"Validation completed for quote {quote.id}: {error_count} total errors"
        )

        return all_results

    def validate_before_submit(self, quote: Quote) -> None:
        """Validate a quote and raise if any rule reports errors.

        Entry point for order placement callers that must refuse to submit
        an invalid quote. The HTTP API reports results via validate() instead.

        Raises:
            QuoteValidationError: With all error messages in rule order
        """
        messages = [
            error
            for result in self.validate(quote)
            for error in result.errors
        ]

        if messages:
            raise QuoteValidationError(messages)
