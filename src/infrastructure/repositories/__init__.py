"""Repository implementations."""

from .card_repository import SqlAlchemyCardRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .loan_repository import SqlAlchemyLoanRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyLoanRepository",
    "SqlAlchemyCardRepository",
]
