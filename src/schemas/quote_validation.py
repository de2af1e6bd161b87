"""Pydantic schemas for quote validation API"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from domain.quote.models import Quote, QuoteAddress, QuoteItem
from domain.validation.models import ValidationResult


class QuoteItemRequest(BaseModel):
    """Line item of a quote snapshot."""
    sku: str = Field(..., min_length=1)
    name: str
    qty: Decimal = Field(..., ge=0)


class QuoteAddressRequest(BaseModel):
    """Shipping address of a quote snapshot."""
    shipping_method: Optional[str] = None
    pickup_location_code: Optional[str] = None


class QuoteValidationRequest(BaseModel):
    """Request schema for POST /quotes/validate."""
    quote_id: Optional[str] = None
    store_id: int
    shipping_address: Optional[QuoteAddressRequest] = None
    items: list[QuoteItemRequest] = Field(default_factory=list)

    def to_domain(self) -> Quote:
        """Convert request payload to a domain Quote snapshot"""
        address = None
        if self.shipping_address is not None:
            address = QuoteAddress(
                shipping_method=self.shipping_address.shipping_method,
                pickup_location_code=self.shipping_address.pickup_location_code,
            )

        return Quote(
            id=self.quote_id,
            store_id=self.store_id,
            shipping_address=address,
            items=tuple(
                QuoteItem(sku=item.sku, name=item.name, qty=item.qty)
                for item in self.items
            ),
        )


class ValidationResultResponse(BaseModel):
    """Result of one validation rule."""
    errors: list[str] = Field(default_factory=list)
    is_valid: bool


class QuoteValidationResponse(BaseModel):
    """Aggregated quote validation outcome.

    errors is the flattened list of all rule errors, in rule order.
    """
    quote_id: Optional[str] = None
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    results: list[ValidationResultResponse] = Field(default_factory=list)

    @classmethod
    def from_results(cls, quote_id: Optional[str], results: list[ValidationResult]) -> "QuoteValidationResponse":
        errors = [error for result in results for error in result.errors]
        return cls(
            quote_id=quote_id,
            is_valid=not errors,
            errors=errors,
            results=[ValidationResultResponse(**result.to_dict()) for result in results],
        )
