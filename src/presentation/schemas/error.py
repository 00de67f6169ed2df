"""Pydantic schema for API error responses."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ViolationSchema(CamelModel):
    """One failed validation rule."""

    field: str = Field(..., description="Wire name of the offending field", examples=["mobileNumber"])
    reason: str = Field(..., description="Why the value was rejected", examples=["must be exactly 10 digits"])


class ErrorResponseSchema(CamelModel):
    """Standard error response format for all API errors."""

    error: str = Field(
        ...,
        description="Error code",
        examples=["RESOURCE_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found with the given input data mobileNumber : '9876543210'"],
    )
    path: str = Field(..., description="Request path that failed", examples=["/api/fetch"])
    timestamp: datetime = Field(..., description="When the error occurred")
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
    violations: list[ViolationSchema] | None = Field(
        None,
        description="Field-level detail, present for validation failures",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "VALIDATION_FAILED",
                    "message": "mobileNumber: must be exactly 10 digits",
                    "path": "/api/create",
                    "timestamp": "2025-01-01T10:00:00Z",
                    "requestId": "abc123",
                    "violations": [
                        {"field": "mobileNumber", "reason": "must be exactly 10 digits"}
                    ],
                }
            ]
        }
    }
