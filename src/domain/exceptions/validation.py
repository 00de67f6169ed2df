"""Input validation exceptions."""

from dataclasses import dataclass
from typing import List

from .base import DomainException


@dataclass(frozen=True)
class FieldViolation:
    """A single rule violation, named by its wire field."""

    field: str
    reason: str

    def to_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class ValidationFailedException(DomainException):
    """Raised when input fails one or more validation rules."""

    def __init__(self, violations: List[FieldViolation]):
        super().__init__(
            message="; ".join(f"{v.field}: {v.reason}" for v in violations)
            or "Request validation failed",
            code="VALIDATION_FAILED",
        )
        self.violations = list(violations)
