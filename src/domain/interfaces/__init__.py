"""
Domain Interfaces (Ports)
"""

from .repositories import (
    CardRepository,
    CustomerRepository,
    LoanRepository,
    ResourceRepository,
)

__all__ = [
    "ResourceRepository",
    "CustomerRepository",
    "LoanRepository",
    "CardRepository",
]
