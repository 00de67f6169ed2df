"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services import AccountService, CardService, LoanService, utc_now
from src.application.services.base import Clock
from src.core.config import Settings, get_settings
from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import (
    SqlAlchemyCardRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyLoanRepository,
)


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyCustomerRepository:
    """Get a CustomerRepository instance."""
    return SqlAlchemyCustomerRepository(session)


async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyLoanRepository:
    """Get a LoanRepository instance."""
    return SqlAlchemyLoanRepository(session)


async def get_card_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyCardRepository:
    """Get a CardRepository instance."""
    return SqlAlchemyCardRepository(session)


# Auditing dependencies
def get_clock() -> Clock:
    """Get the clock used to stamp audit fields."""
    return utc_now


# Service dependencies
async def get_account_service(
    repository: Annotated[SqlAlchemyCustomerRepository, Depends(get_customer_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> AccountService:
    """Get an AccountService instance."""
    return AccountService(repository, actor=app_settings.actor_for("accounts"), clock=clock)


async def get_loan_service(
    repository: Annotated[SqlAlchemyLoanRepository, Depends(get_loan_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> LoanService:
    """Get a LoanService instance."""
    return LoanService(repository, actor=app_settings.actor_for("loans"), clock=clock)


async def get_card_service(
    repository: Annotated[SqlAlchemyCardRepository, Depends(get_card_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> CardService:
    """Get a CardService instance."""
    return CardService(repository, actor=app_settings.actor_for("cards"), clock=clock)
