"""PostgreSQL implementation of Account repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Account
from portal.domain.repository import AccountRepository
from portal.domain.value import ApprovalStatus, UserId
from portal.persistence.mappers import account_to_dict, row_to_account
from portal.persistence.tables import users_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: UserId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_matric_number(self, matric_number: str) -> Optional[Account]:
        stmt = select(users_table).where(users_table.c.matric_number == matric_number)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_status(self, status: ApprovalStatus) -> list[Account]:
        stmt = (
            select(users_table)
            .where(users_table.c.approval_status == status.value)
            .order_by(users_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings().all()]

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Inserts run inside a savepoint so a uniqueness violation leaves the
        surrounding transaction usable.

        Args:
            account: Account to save

        Returns:
            Saved account

        Raises:
            IntegrityError: If email or matric number is already taken
        """
        existing = await self.find_by_id(account.id)
        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == account.id)
                .values(**account_dict)
            )
            await self.session.execute(stmt)
        else:
            async with self.session.begin_nested():
                await self.session.execute(users_table.insert().values(**account_dict))
            logfire.info("Account row inserted", account_id=str(account.id))

        await self.session.flush()
        return account

    async def count_by_status(self) -> dict[ApprovalStatus, int]:
        stmt = select(users_table.c.approval_status, func.count()).group_by(
            users_table.c.approval_status
        )
        result = await self.session.execute(stmt)
        counts = {status: 0 for status in ApprovalStatus}
        for status, count in result.all():
            counts[ApprovalStatus(status)] = count
        return counts

    async def find_newest(self, status: ApprovalStatus, limit: int) -> list[Account]:
        stmt = (
            select(users_table)
            .where(users_table.c.approval_status == status.value)
            .order_by(users_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings().all()]
