"""Customer account API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.dto import AccountDetailsDTO, CustomerRequest
from src.application.services import AccountService
from src.core.dependencies import get_account_service
from src.core.metrics import track_operation
from src.presentation.schemas import (
    CustomerRequestSchema,
    CustomerResponseSchema,
    ResponseSchema,
)
from .common import (
    CONFLICT_RESPONSE,
    ERROR_RESPONSES,
    MOBILE_NUMBER_DESCRIPTION,
    NOT_FOUND_RESPONSE,
    STATUS_OK,
)

SERVICE = "accounts"

accounts_router = APIRouter(prefix="/api", responses=ERROR_RESPONSES)


def _to_request(schema: CustomerRequestSchema) -> CustomerRequest:
    account = None
    if schema.account is not None:
        account = AccountDetailsDTO(
            account_type=schema.account.account_type,
            branch_address=schema.account.branch_address,
        )

    return CustomerRequest(
        name=schema.name,
        email=schema.email,
        mobile_number=schema.mobile_number,
        account=account,
    )


@accounts_router.post(
    "/create",
    response_model=CustomerResponseSchema,
    status_code=201,
    summary="Create Account",
    description="Register a customer and open a bank account for them.",
    responses=CONFLICT_RESPONSE,
)
async def create_account(
    request: CustomerRequestSchema,
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> CustomerResponseSchema:
    with track_operation(SERVICE, "create"):
        response = await account_service.create(_to_request(request))

    return CustomerResponseSchema.from_dto(response)


@accounts_router.get(
    "/fetch",
    response_model=CustomerResponseSchema,
    summary="Fetch Account",
    description="Retrieve a customer and their account by mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def fetch_account(
    account_service: Annotated[AccountService, Depends(get_account_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> CustomerResponseSchema:
    with track_operation(SERVICE, "fetch"):
        response = await account_service.fetch(mobile_number)

    return CustomerResponseSchema.from_dto(response)


@accounts_router.put(
    "/update",
    response_model=CustomerResponseSchema,
    summary="Update Account",
    description="""
    Replace the customer's details and, when given, the account type and
    branch. The account number never changes.
    """,
    responses=NOT_FOUND_RESPONSE,
)
async def update_account(
    request: CustomerRequestSchema,
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> CustomerResponseSchema:
    with track_operation(SERVICE, "update"):
        response = await account_service.update(_to_request(request))

    return CustomerResponseSchema.from_dto(response)


@accounts_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Account",
    description="Delete a customer and their account by mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_account(
    account_service: Annotated[AccountService, Depends(get_account_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> ResponseSchema:
    with track_operation(SERVICE, "delete"):
        await account_service.delete(mobile_number)

    return STATUS_OK
