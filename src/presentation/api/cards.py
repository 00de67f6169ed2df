"""Card API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.dto import CardCreateRequest, CardUpdateRequest
from src.application.services import CardService
from src.core.dependencies import get_card_service
from src.core.metrics import track_operation
from src.presentation.schemas import (
    CardCreateSchema,
    CardResponseSchema,
    CardUpdateSchema,
    ResponseSchema,
)
from .common import (
    CONFLICT_RESPONSE,
    ERROR_RESPONSES,
    MOBILE_NUMBER_DESCRIPTION,
    NOT_FOUND_RESPONSE,
    STATUS_OK,
)

SERVICE = "cards"

cards_router = APIRouter(prefix="/api", responses=ERROR_RESPONSES)


@cards_router.post(
    "/create",
    response_model=CardResponseSchema,
    status_code=201,
    summary="Create Card",
    description="Issue a card for a mobile number. Omitted terms take the defaults.",
    responses=CONFLICT_RESPONSE,
)
async def create_card(
    request: CardCreateSchema,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardResponseSchema:
    dto = CardCreateRequest(
        mobile_number=request.mobile_number,
        card_type=request.card_type,
        total_limit=request.total_limit,
    )

    with track_operation(SERVICE, "create"):
        response = await card_service.create(dto)

    return CardResponseSchema.from_dto(response)


@cards_router.get(
    "/fetch",
    response_model=CardResponseSchema,
    summary="Fetch Card",
    description="Retrieve the card held by a mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def fetch_card(
    card_service: Annotated[CardService, Depends(get_card_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> CardResponseSchema:
    with track_operation(SERVICE, "fetch"):
        response = await card_service.fetch(mobile_number)

    return CardResponseSchema.from_dto(response)


@cards_router.put(
    "/update",
    response_model=CardResponseSchema,
    summary="Update Card",
    description="""
    Replace the card type, limit and amount used. The available amount
    is recomputed; the card number never changes.
    """,
    responses=NOT_FOUND_RESPONSE,
)
async def update_card(
    request: CardUpdateSchema,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardResponseSchema:
    dto = CardUpdateRequest(
        mobile_number=request.mobile_number,
        card_type=request.card_type,
        total_limit=request.total_limit,
        amount_used=request.amount_used,
    )

    with track_operation(SERVICE, "update"):
        response = await card_service.update(dto)

    return CardResponseSchema.from_dto(response)


@cards_router.delete(
    "/delete",
    response_model=ResponseSchema,
    summary="Delete Card",
    description="Delete the card held by a mobile number.",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_card(
    card_service: Annotated[CardService, Depends(get_card_service)],
    mobile_number: Annotated[
        str | None,
        Query(alias="mobileNumber", description=MOBILE_NUMBER_DESCRIPTION),
    ] = None,
) -> ResponseSchema:
    with track_operation(SERVICE, "delete"):
        await card_service.delete(mobile_number)

    return STATUS_OK
