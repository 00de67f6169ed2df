"""Base schema with camelCase wire names."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.application.dto import AuditDTO


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case names work in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuditFieldsSchema(CamelModel):
    """Read-only audit fields included in every resource response."""

    created_at: datetime | None = Field(None, description="When the record was created")
    created_by: str | None = Field(None, description="Who created the record")
    updated_at: datetime | None = Field(None, description="When the record was last changed")
    updated_by: str | None = Field(None, description="Who last changed the record")


def audit_fields(audit: AuditDTO) -> dict:
    return {
        "created_at": audit.created_at,
        "created_by": audit.created_by,
        "updated_at": audit.updated_at,
        "updated_by": audit.updated_by,
    }


class ResponseSchema(CamelModel):
    """Acknowledgement for operations that return no resource."""

    status_code: str = Field(..., examples=["200"])
    status_msg: str = Field(..., examples=["Request processed successfully"])
