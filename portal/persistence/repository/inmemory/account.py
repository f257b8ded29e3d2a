"""In-memory account repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from portal.domain.model import Account
from portal.domain.repository import AccountRepository
from portal.domain.value import ApprovalStatus, UserId


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[UserId, Account] = {}

    async def find_by_id(self, account_id: UserId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_matric_number(self, matric_number: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.matric_number == matric_number:
                return account
        return None

    async def find_by_status(self, status: ApprovalStatus) -> list[Account]:
        matching = [a for a in self._accounts.values() if a.approval_status == status]
        return sorted(matching, key=lambda a: a.created_at)

    async def save(self, account: Account) -> Account:
        """Save or update an account.

        Raises:
            IntegrityError: If another account holds the email or matric number
        """
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            if other.email == account.email:
                raise IntegrityError("Duplicate email", None, Exception())
            if account.matric_number and other.matric_number == account.matric_number:
                raise IntegrityError("Duplicate matric_number", None, Exception())

        self._accounts[account.id] = account
        return account

    async def count_by_status(self) -> dict[ApprovalStatus, int]:
        counts = {status: 0 for status in ApprovalStatus}
        for account in self._accounts.values():
            counts[account.approval_status] += 1
        return counts

    async def find_newest(self, status: ApprovalStatus, limit: int) -> list[Account]:
        matching = [a for a in self._accounts.values() if a.approval_status == status]
        matching.sort(key=lambda a: a.created_at, reverse=True)
        return matching[:limit]
