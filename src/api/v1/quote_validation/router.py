"""Quote validation API router"""

import logging

from fastapi import APIRouter, Depends

from dependencies import get_quote_validation_engine
from domain.validation.engine import QuoteValidationEngine
from schemas.quote_validation import QuoteValidationRequest, QuoteValidationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quote-validation"])


@router.post("/validate", response_model=QuoteValidationResponse)
def validate_quote(
    request: QuoteValidationRequest,
    engine: QuoteValidationEngine = Depends(get_quote_validation_engine)
):
    """Validate a quote snapshot against all quote validation rules.

    Business failures (missing pickup location, missing or insufficient
    stock) are returned as messages with HTTP 200. Unknown reference data
    (store, sales channel, pickup location) is a server error.

    Args:
        request: Quote snapshot
        engine: Quote validation engine

    Returns:
        Aggregated validation results
    """
    quote = request.to_domain()
    results = engine.validate(quote)

    response = QuoteValidationResponse.from_results(request.quote_id, results)
    logger.info(
        f"Quote {request.quote_id} validated: is_valid={response.is_valid}",
        extra={"quote_id": request.quote_id}
    )
    return response
