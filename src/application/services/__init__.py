"""Application services (use cases)."""

from .account_service import AccountService
from .base import ResourceService, utc_now
from .card_service import CardService
from .loan_service import LoanService

__all__ = [
    "ResourceService",
    "AccountService",
    "LoanService",
    "CardService",
    "utc_now",
]
