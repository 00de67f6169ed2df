"""Data Transfer Objects for application layer."""

from .account import (
    AccountDetailsDTO,
    AccountResponse,
    CustomerRequest,
    CustomerResponse,
)
from .card import CardCreateRequest, CardResponse, CardUpdateRequest
from .common import AuditDTO
from .loan import LoanCreateRequest, LoanResponse, LoanUpdateRequest

__all__ = [
    "AuditDTO",
    "AccountDetailsDTO",
    "AccountResponse",
    "CustomerRequest",
    "CustomerResponse",
    "LoanCreateRequest",
    "LoanUpdateRequest",
    "LoanResponse",
    "CardCreateRequest",
    "CardUpdateRequest",
    "CardResponse",
]
