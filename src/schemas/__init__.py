"""Pydantic schemas for API request/response validation"""

from .quote_validation import (
    QuoteItemRequest,
    QuoteAddressRequest,
    QuoteValidationRequest,
    ValidationResultResponse,
    QuoteValidationResponse,
)

__all__ = [
    "QuoteItemRequest",
    "QuoteAddressRequest",
    "QuoteValidationRequest",
    "ValidationResultResponse",
    "QuoteValidationResponse",
]
