"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import (
    AccountModel,
    Base,
    CardModel,
    CustomerModel,
    LoanModel,
    SERVICE_TABLES,
)

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "CustomerModel",
    "AccountModel",
    "LoanModel",
    "CardModel",
    "SERVICE_TABLES",
]
