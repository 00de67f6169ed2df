"""Resource lifecycle exceptions shared by all services."""

from .base import DomainException


class ResourceNotFoundException(DomainException):
    """Raised when no record exists for the given key."""

    def __init__(self, resource: str, field: str, value: str):
        super().__init__(
            message=f"{resource} not found with the given input data {field} : '{value}'",
            code="RESOURCE_NOT_FOUND",
        )
        self.resource = resource
        self.field = field
        self.value = value


class ResourceAlreadyExistsException(DomainException):
    """Raised when a record already occupies the given key."""

    def __init__(self, resource: str, field: str, value: str):
        super().__init__(
            message=f"{resource} already exists with the given input data {field} : '{value}'",
            code="RESOURCE_ALREADY_EXISTS",
        )
        self.resource = resource
        self.field = field
        self.value = value
