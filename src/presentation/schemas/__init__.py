"""Pydantic schemas for API request/response validation."""

from .account import (
    AccountDetailsSchema,
    AccountSchema,
    CustomerRequestSchema,
    CustomerResponseSchema,
)
from .base import AuditFieldsSchema, CamelModel, ResponseSchema
from .card import CardCreateSchema, CardResponseSchema, CardUpdateSchema
from .error import ErrorResponseSchema, ViolationSchema
from .loan import LoanCreateSchema, LoanResponseSchema, LoanUpdateSchema

__all__ = [
    "CamelModel",
    "AuditFieldsSchema",
    "ResponseSchema",
    "AccountDetailsSchema",
    "AccountSchema",
    "CustomerRequestSchema",
    "CustomerResponseSchema",
    "LoanCreateSchema",
    "LoanUpdateSchema",
    "LoanResponseSchema",
    "CardCreateSchema",
    "CardUpdateSchema",
    "CardResponseSchema",
    "ErrorResponseSchema",
    "ViolationSchema",
]
