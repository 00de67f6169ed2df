from fastapi import APIRouter

from .accounts import accounts_router
from .cards import cards_router
from .loans import loans_router

SERVICE_ROUTERS: dict[str, tuple[APIRouter, str]] = {
    "accounts": (accounts_router, "Accounts"),
    "loans": (loans_router, "Loans"),
    "cards": (cards_router, "Cards"),
}


def build_router(service: str) -> APIRouter:
    """Router carrying only the endpoints of one service."""
    router = APIRouter()
    service_router, tag = SERVICE_ROUTERS[service]
    router.include_router(service_router, tags=[tag])
    return router
