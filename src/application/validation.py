"""Declarative field validation.

Each DTO declares a mapping of attribute path to rules. ``validate``
walks every path and returns the full list of violations, so a client
can correct all fields in one round trip. Violations are named by the
wire (camelCase) field, dotted for nested objects.
"""

import re
from abc import ABC, abstractmethod
from types import SimpleNamespace
from typing import Any, List, Mapping, Optional, Sequence

from email_validator import EmailNotValidError, validate_email
from pydantic.alias_generators import to_camel

from src.domain.exceptions import FieldViolation, ValidationFailedException

MOBILE_NUMBER_PATTERN = r"^[0-9]{10}$"

# Largest value the 32-bit amount columns hold.
MAX_AMOUNT = 2_147_483_647


class Rule(ABC):
    """A single check on a field value."""

    # Rules that also apply when the value is missing.
    checks_missing = False

    @abstractmethod
    def check(self, value: Any) -> Optional[str]:
        """Return a violation reason, or None if the value passes."""
        ...


class Required(Rule):
    checks_missing = True

    def __init__(self, message: str = "must not be empty"):
        self.message = message

    def check(self, value: Any) -> Optional[str]:
        if value is None:
            return self.message
        if isinstance(value, str) and not value.strip():
            return self.message
        return None


class Pattern(Rule):
    def __init__(self, regex: str, message: str):
        self.regex = re.compile(regex)
        self.message = message

    def check(self, value: Any) -> Optional[str]:
        if not isinstance(value, str) or not self.regex.match(value):
            return self.message
        return None


class Length(Rule):
    def __init__(self, min_length: int = 0, max_length: int | None = None):
        self.min_length = min_length
        self.max_length = max_length

    def check(self, value: Any) -> Optional[str]:
        size = len(value)
        if size < self.min_length or (self.max_length is not None and size > self.max_length):
            if self.max_length is None:
                return f"length must be at least {self.min_length}"
            return f"length must be between {self.min_length} and {self.max_length}"
        return None


class Range(Rule):
    def __init__(
        self,
        minimum: int | None = None,
        maximum: int | None = None,
        exclusive_minimum: bool = False,
    ):
        self.minimum = minimum
        self.maximum = maximum
        self.exclusive_minimum = exclusive_minimum

    def check(self, value: Any) -> Optional[str]:
        if self.minimum is not None:
            if self.exclusive_minimum and value <= self.minimum:
                return f"must be greater than {self.minimum}"
            if not self.exclusive_minimum and value < self.minimum:
                return f"must be greater than or equal to {self.minimum}"
        if self.maximum is not None and value > self.maximum:
            return f"must be less than or equal to {self.maximum}"
        return None


class Email(Rule):
    """Syntax check only; the domain is not resolved."""

    def check(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return "must be a valid email address"
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return "must be a valid email address"
        return None


class NotBlank(Rule):
    """Rejects blank strings; a missing value is left to ``Required``."""

    def check(self, value: Any) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return "must not be blank"
        return None


MobileNumber = Pattern(MOBILE_NUMBER_PATTERN, "must be exactly 10 digits")

FieldRules = Mapping[str, Sequence[Rule]]


def wire_name(path: str) -> str:
    """Translate an attribute path to its camelCase wire name."""
    return ".".join(to_camel(part) for part in path.split("."))


def _resolve(obj: Any, path: str) -> Any:
    value = obj
    for part in path.split("."):
        if value is None:
            return None
        value = getattr(value, part, None)
    return value


def validate(obj: Any, rules: FieldRules) -> List[FieldViolation]:
    """
    Apply declarative rules to an object.

    Only the first failing rule per field is reported; every field
    is checked. Missing values are skipped by rules other than
    ``Required``.
    """
    violations = []

    for path, field_rules in rules.items():
        value = _resolve(obj, path)
        for rule in field_rules:
            if value is None and not rule.checks_missing:
                continue
            reason = rule.check(value)
            if reason is not None:
                violations.append(FieldViolation(field=wire_name(path), reason=reason))
                break

    return violations


def ensure_valid(violations: List[FieldViolation]) -> None:
    """Raise ValidationFailedException if any violation was collected."""
    if violations:
        raise ValidationFailedException(violations)


def validate_key(mobile_number: str | None) -> None:
    """Validate a natural key used for lookups."""
    ensure_valid(
        validate(
            SimpleNamespace(mobile_number=mobile_number),
            {"mobile_number": [Required(), MobileNumber]},
        )
    )
