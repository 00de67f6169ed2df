"""PostgreSQL implementation of LoanRepository."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Loan
from src.domain.exceptions import ResourceNotFoundException
from src.domain.interfaces import LoanRepository
from src.infrastructure.database.models import LoanModel
from .base import apply_audit, audit_from_model, flush_or_conflict


class SqlAlchemyLoanRepository(LoanRepository):
    """SQLAlchemy-backed loan repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: Loan) -> Loan:
        if loan.id is None:
            model = LoanModel()
            self._session.add(model)
        else:
            model = await self._session.get(LoanModel, loan.id)
            if model is None:
                raise ResourceNotFoundException("Loan", "mobileNumber", loan.mobile_number)

        model.mobile_number = loan.mobile_number
        model.loan_number = loan.loan_number
        model.loan_type = loan.loan_type
        model.total_loan = loan.total_loan
        model.amount_paid = loan.amount_paid
        model.outstanding_amount = loan.outstanding_amount
        apply_audit(model, loan.audit)

        await flush_or_conflict(self._session, "Loan", loan.mobile_number)

        loan.id = model.loan_id
        return loan

    async def get_by_key(self, mobile_number: str) -> Optional[Loan]:
        stmt = select(LoanModel).where(LoanModel.mobile_number == mobile_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def exists_by_key(self, mobile_number: str) -> bool:
        stmt = select(exists().where(LoanModel.mobile_number == mobile_number))
        return bool(await self._session.scalar(stmt))

    async def delete_by_key(self, mobile_number: str) -> bool:
        stmt = delete(LoanModel).where(LoanModel.mobile_number == mobile_number)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    def _to_entity(self, model: LoanModel) -> Loan:
        return Loan(
            id=model.loan_id,
            mobile_number=model.mobile_number,
            loan_number=model.loan_number,
            loan_type=model.loan_type,
            total_loan=model.total_loan,
            amount_paid=model.amount_paid,
            audit=audit_from_model(model),
        )
