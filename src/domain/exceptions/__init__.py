"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .resource import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from .validation import FieldViolation, ValidationFailedException

__all__ = [
    "DomainException",
    "ResourceAlreadyExistsException",
    "ResourceNotFoundException",
    "FieldViolation",
    "ValidationFailedException",
]
