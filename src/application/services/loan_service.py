"""Loan service - loan lifecycle."""

import random

from src.application.dto import LoanCreateRequest, LoanResponse, LoanUpdateRequest
from src.domain.entities import Loan
from .base import ResourceService


def generate_loan_number() -> str:
    """Random 12-digit loan number."""
    return str(100_000_000_000 + random.randint(0, 899_999_999))


class LoanService(ResourceService[Loan, LoanResponse]):
    """
    Application service for loans.

    New loans start with nothing paid. The outstanding amount is always
    derived from the total and the amount paid.
    """

    resource = "Loan"

    async def _new_entity(self, request: LoanCreateRequest) -> Loan:
        loan = request.to_entity()
        loan.loan_number = generate_loan_number()
        loan.amount_paid = 0
        return loan

    async def _apply_update(self, loan: Loan, request: LoanUpdateRequest) -> None:
        loan.loan_type = request.loan_type
        loan.total_loan = request.total_loan
        loan.amount_paid = request.amount_paid

    def _to_response(self, loan: Loan) -> LoanResponse:
        return LoanResponse.from_entity(loan)
