"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from portal.domain.model.account import Account
from portal.domain.value import ApprovalStatus, UserId


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Defines the contract for credential-store persistence.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: UserId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by normalised email.

        Args:
            email: Lower-cased email address

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_matric_number(self, matric_number: str) -> Optional[Account]:
        """Find an account by normalised matric number.

        Args:
            matric_number: Upper-cased matric number

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: ApprovalStatus) -> list[Account]:
        """Find accounts in an approval state, oldest first.

        Args:
            status: Approval status to filter by

        Returns:
            Matching accounts
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            IntegrityError: If email or matric number is already taken
        """
        pass

    @abstractmethod
    async def count_by_status(self) -> dict[ApprovalStatus, int]:
        """Count accounts per approval status.

        Returns:
            Mapping of every status to its account count
        """
        pass

    @abstractmethod
    async def find_newest(self, status: ApprovalStatus, limit: int) -> list[Account]:
        """Find the most recently created accounts in an approval state."""
        pass
