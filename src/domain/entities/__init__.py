"""Domain Entities - Core business objects."""

from .audit import AuditInfo
from .card import Card
from .customer import Account, Customer
from .loan import Loan

__all__ = [
    "AuditInfo",
    "Account",
    "Customer",
    "Loan",
    "Card",
]
