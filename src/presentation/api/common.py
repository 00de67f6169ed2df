"""Shared pieces of the resource routers."""

from src.presentation.schemas import ErrorResponseSchema, ResponseSchema

STATUS_OK = ResponseSchema(status_code="200", status_msg="Request processed successfully")

MOBILE_NUMBER_DESCRIPTION = "Customer mobile number, exactly 10 digits"

ERROR_RESPONSES = {
    400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    500: {"model": ErrorResponseSchema, "description": "Unexpected failure"},
}
NOT_FOUND_RESPONSE = {
    404: {"model": ErrorResponseSchema, "description": "No record for the mobile number"},
}
CONFLICT_RESPONSE = {
    409: {"model": ErrorResponseSchema, "description": "Mobile number already registered"},
}
