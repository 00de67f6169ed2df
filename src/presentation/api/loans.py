"""Loan API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.dto import LoanCreateRequest, LoanUpdateRequest
from src.application.services import LoanService
from src.core.dependencies import get_loan_service
from src.core.metrics import track_operation
from src.presentation.schemas import (
    LoanCreateSchema,
    LoanResponseSchema,
    LoanUpdateSchema,
    ResponseSchema,
)
from .common import (
    CONFLICT_RESPONSE,
    ERROR_RESPONSES,
    MOBILE_NUMBER_DESCRIPTION,
    NOT_FOUND_RESPONSE,
    STATUS_OK,
)

SERVICE = "loans"

loans_router = APIRouter(prefix="/api", responses=ERROR_RESPONSES)


@loans_router.post(
    "/create",
    response_model=LoanResponseSchema,
    status_code=201,
    summary="Create Loan",
    description="Open a loan for a mobile number. Omitted terms take the defaults.",
    responses=CONFLICT_RESPONSE,
)
async def create_loan(
    request: LoanCreateSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    dto = LoanCreateRequest(
        mobile_number=request.mobile_number,
        loan_type=request.loan_type,
        total_loan=request.total_loan,
    )

    with track_operation(SERVICE, "create"):
        response = await loan_service.create(dto)

    return LoanResponseSchema.from_dto(response)


@loans_router.get(
    "/fetch",
    response_model=LoanResponseSchema,
    summary="Fetch Loan",
    description="Retrieve the loan held by a mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def fetch_loan(
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> LoanResponseSchema:
    with track_operation(SERVICE, "fetch"):
        response = await loan_service.fetch(mobile_number)

    return LoanResponseSchema.from_dto(response)


@loans_router.put(
    "/update",
    response_model=LoanResponseSchema,
    summary="Update Loan",
    description="""
    Replace the loan type, total and amount paid. The outstanding amount
    is recomputed; the loan number never changes.
    """,
    responses=NOT_FOUND_RESPONSE,
)
async def update_loan(
    request: LoanUpdateSchema,
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    dto = LoanUpdateRequest(
        mobile_number=request.mobile_number,
        loan_type=request.loan_type,
        total_loan=request.total_loan,
        amount_paid=request.amount_paid,
    )

    with track_operation(SERVICE, "update"):
        response = await loan_service.update(dto)

    return LoanResponseSchema.from_dto(response)


@loans_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Loan",
    description="Delete the loan held by a mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_loan(
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> ResponseSchema:
    with track_operation(SERVICE, "delete"):
        await loan_service.delete(mobile_number)

    return STATUS_OK
