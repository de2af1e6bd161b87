"""Quote validation result models"""

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation rule.

    An empty error tuple means the quote passed the rule.
    """
    errors: tuple[str, ...] = field(default_factory=tuple)

    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses"""
        return {
            "errors": list(self.errors),
            "is_valid": self.is_valid(),
        }


class ValidationResultFactory:
    """Builds immutable ValidationResult objects from accumulated messages."""

    def create(self, errors: Iterable[str] = ()) -> ValidationResult:
        return ValidationResult(errors=tuple(errors))
