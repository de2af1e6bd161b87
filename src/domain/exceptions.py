"""Domain exceptions shared across quote validation components."""

from typing import Any, Iterable, Optional


class NoSuchEntityError(LookupError):
    """Referenced entity does not exist.

    Raised by lookup adapters when reference data (store, website,
    pickup location, sales channel stock) cannot be resolved. This is a
    data-integrity fault, not a customer-facing validation failure, so
    validation rules let it propagate.
    """

    def __init__(self, entity: str, identifier: Any, message: Optional[str] = None):
        self.entity = entity
        self.identifier = identifier
        super().__init__(message or f"{entity} with identifier '{identifier}' does not exist")


class QuoteValidationError(ValueError):
    """Quote failed one or more validation rules before submission."""

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))
