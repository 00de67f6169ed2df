"""Generic resource lifecycle shared by the account, loan and card services."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, ClassVar, Generic, TypeVar

import structlog

from src.application.validation import ensure_valid, validate_key
from src.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from src.domain.interfaces import ResourceRepository

logger = structlog.get_logger(__name__)

EntityT = TypeVar("EntityT")
ResponseT = TypeVar("ResponseT")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResourceService(ABC, Generic[EntityT, ResponseT]):
    """
    Create, fetch, update and delete one kind of record by mobile number.

    A record is either absent or present. ``create`` is the only way
    to make it present and ``delete`` the only way to make it absent;
    ``fetch``, ``update`` and ``delete`` on an absent record all raise
    ResourceNotFoundException. Audit fields are stamped here, from the
    injected clock and actor, never taken from the request.
    """

    resource: ClassVar[str]
    key_field: ClassVar[str] = "mobileNumber"

    def __init__(
        self,
        repository: ResourceRepository[EntityT],
        actor: str,
        clock: Clock = utc_now,
    ):
        self._repo = repository
        self._actor = actor
        self._clock = clock

    async def create(self, request) -> ResponseT:
        """
        Create a record for a new mobile number.

        Args:
            request: Create request DTO

        Returns:
            Transfer representation of the created record

        Raises:
            ValidationFailedException: If the request breaks any rule
            ResourceAlreadyExistsException: If the mobile number is taken
        """
        ensure_valid(request.validate())

        log = logger.bind(resource=self.resource, mobile_number=request.mobile_number)

        if await self._repo.exists_by_key(request.mobile_number):
            log.warning("resource_already_exists")
            raise ResourceAlreadyExistsException(
                self.resource, self.key_field, request.mobile_number
            )

        entity = await self._new_entity(request)
        entity.audit.stamp_created(self._actor, self._clock())

        saved = await self._repo.save(entity)
        log.info("resource_created", actor=self._actor)

        return self._to_response(saved)

    async def fetch(self, mobile_number: str) -> ResponseT:
        """
        Fetch the record stored under a mobile number.

        Raises:
            ValidationFailedException: If the mobile number is malformed
            ResourceNotFoundException: If no record exists
        """
        validate_key(mobile_number)

        entity = await self._get_existing(mobile_number)
        logger.info("resource_fetched", resource=self.resource, mobile_number=mobile_number)

        return self._to_response(entity)

    async def update(self, request) -> ResponseT:
        """
        Replace the writable fields of an existing record.

        Creation audit fields are kept; update audit fields are re-stamped.

        Args:
            request: Update request DTO carrying the mobile number

        Returns:
            Transfer representation of the updated record

        Raises:
            ValidationFailedException: If the request breaks any rule
            ResourceNotFoundException: If no record exists
        """
        ensure_valid(request.validate())

        entity = await self._get_existing(request.mobile_number)
        await self._apply_update(entity, request)
        entity.audit.stamp_updated(self._actor, self._clock())

        saved = await self._repo.save(entity)
        logger.info(
            "resource_updated",
            resource=self.resource,
            mobile_number=request.mobile_number,
            actor=self._actor,
        )

        return self._to_response(saved)

    async def delete(self, mobile_number: str) -> None:
        """
        Delete the record stored under a mobile number.

        Raises:
            ValidationFailedException: If the mobile number is malformed
            ResourceNotFoundException: If no row was removed
        """
        validate_key(mobile_number)

        removed = await self._repo.delete_by_key(mobile_number)
        if not removed:
            logger.warning("resource_not_found", resource=self.resource, mobile_number=mobile_number)
            raise ResourceNotFoundException(self.resource, self.key_field, mobile_number)

        logger.info("resource_deleted", resource=self.resource, mobile_number=mobile_number)

    async def _get_existing(self, mobile_number: str) -> EntityT:
        entity = await self._repo.get_by_key(mobile_number)

        if entity is None:
            logger.warning("resource_not_found", resource=self.resource, mobile_number=mobile_number)
            raise ResourceNotFoundException(self.resource, self.key_field, mobile_number)

        return entity

    @abstractmethod
    async def _new_entity(self, request) -> EntityT:
        """Build a new record from a create request, generated fields included."""
        ...

    @abstractmethod
    async def _apply_update(self, entity: EntityT, request) -> None:
        """Copy the writable fields of an update request onto a record."""
        ...

    @abstractmethod
    def _to_response(self, entity: EntityT) -> ResponseT:
        ...
