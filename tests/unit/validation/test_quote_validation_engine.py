"""Unit tests for QuoteValidationEngine aggregation and submit guard"""

from decimal import Decimal

import pytest

from domain.exceptions import NoSuchEntityError, QuoteValidationError
from domain.quote.models import Quote, QuoteItem
from domain.validation.engine import QuoteValidationEngine
from domain.validation.models import ValidationResult, ValidationResultFactory
from domain.validation.port import QuoteValidationRulePort


class FixedRule(QuoteValidationRulePort):
    def __init__(self, *errors_per_result: tuple[str, ...]):
        self.results = [ValidationResult(errors=errors) for errors in errors_per_result]
        self.calls = 0

    def validate(self, quote: Quote) -> list[ValidationResult]:
        self.calls += 1
        return list(self.results)


class FailingRule(QuoteValidationRulePort):
    def validate(self, quote: Quote) -> list[ValidationResult]:
        raise NoSuchEntityError("PickupLocation", "STORE404")


@pytest.fixture
def quote():
    return Quote(id="q-7", store_id=1, items=(QuoteItem("ABC", "Widget", Decimal("1")),))


class TestQuoteValidationEngine:
    """Test rule orchestration"""

    def test_no_rules_yields_no_results(self, quote):
        assert QuoteValidationEngine(rules=[]).validate(quote) == []

    def test_results_concatenated_in_rule_order(self, quote):
        first = FixedRule(("first error",))
        second = FixedRule((), ("second error", "third error"))
        engine = QuoteValidationEngine(rules=[first, second])

        results = engine.validate(quote)

        assert [r.errors for r in results] == [
            ("first error",),
            (),
            ("second error", "third error"),
        ]
        assert first.calls == 1
        assert second.calls == 1

    def test_rule_exception_propagates(self, quote):
        after = FixedRule(())
        engine = QuoteValidationEngine(rules=[FailingRule(), after])

        with pytest.raises(NoSuchEntityError):
            engine.validate(quote)

        assert after.calls == 0

    def test_validate_before_submit_passes_when_valid(self, quote):
        engine = QuoteValidationEngine(rules=[FixedRule((), ())])

        assert engine.validate_before_submit(quote) is None

    def test_validate_before_submit_raises_with_all_messages(self, quote):
        engine = QuoteValidationEngine(rules=[
            FixedRule(("Quote does not have Pickup Location assigned.",)),
            FixedRule(("another problem",)),
        ])

        with pytest.raises(QuoteValidationError) as exc_info:
            engine.validate_before_submit(quote)

        assert exc_info.value.messages == [
            "Quote does not have Pickup Location assigned.",
            "another problem",
        ]
        assert "another problem" in str(exc_info.value)


class TestValidationResultFactory:
    """Test result construction"""

    def test_create_copies_errors_into_tuple(self):
        errors = ["a", "b"]
        result = ValidationResultFactory().create(errors)
        errors.append("c")

        assert result.errors == ("a", "b")
        assert result.is_valid() is False

    def test_create_without_errors_is_valid(self):
        result = ValidationResultFactory().create()

        assert result.is_valid() is True
        assert result.to_dict() == {"errors": [], "is_valid": True}
