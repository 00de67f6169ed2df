"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from src.domain.entities import Card, Customer, Loan

EntityT = TypeVar("EntityT")


class ResourceRepository(ABC, Generic[EntityT]):
    """
    Abstract repository for a record addressed by a natural key.

    Every service keys its records by the customer's mobile number.
    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """
        Persist a record.

        Records without an identity are inserted; records with one
        replace the stored row.

        Args:
            entity: The record to save

        Returns:
            The saved record with any generated fields populated

        Raises:
            ResourceAlreadyExistsException: If an insert collides with
                an existing natural key
        """
        ...

    @abstractmethod
    async def get_by_key(self, mobile_number: str) -> Optional[EntityT]:
        """
        Retrieve a record by its natural key.

        Args:
            mobile_number: The customer's mobile number

        Returns:
            The record if found, None otherwise
        """
        ...

    @abstractmethod
    async def exists_by_key(self, mobile_number: str) -> bool:
        """
        Check whether a record exists for the natural key.

        Args:
            mobile_number: The customer's mobile number

        Returns:
            True if a record exists
        """
        ...

    @abstractmethod
    async def delete_by_key(self, mobile_number: str) -> bool:
        """
        Delete the record stored under the natural key.

        Args:
            mobile_number: The customer's mobile number

        Returns:
            True if a row was removed, False if nothing matched
        """
        ...


class CustomerRepository(ResourceRepository[Customer]):
    """Customer (with account) persistence."""

    @abstractmethod
    async def account_number_exists(self, account_number: int) -> bool:
        """
        Check whether an account number has already been issued.

        Args:
            account_number: Candidate account number

        Returns:
            True if an account already uses the number
        """
        ...


class LoanRepository(ResourceRepository[Loan]):
    """Loan persistence."""


class CardRepository(ResourceRepository[Card]):
    """Card persistence."""
