"""PostgreSQL implementations of Poll and PollVote repositories."""

from collections import defaultdict
from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Poll, PollOption, PollVote
from portal.domain.repository import PollRepository, PollVoteRepository
from portal.domain.value import PollId, PollOptionId, PollStatus, UserId
from portal.persistence.mappers import (
    poll_options_to_dicts,
    poll_to_dict,
    poll_vote_to_dict,
    row_to_poll,
    row_to_poll_option,
)
from portal.persistence.tables import poll_options_table, poll_votes_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_options_for_polls(
        self, poll_ids: list[UUID]
    ) -> dict[UUID, list[PollOption]]:
        """Fetch options for multiple polls in a single query.

        Args:
            poll_ids: List of poll IDs

        Returns:
            Dict mapping poll_id -> options in display order
        """
        if not poll_ids:
            return {}

        stmt = (
            select(poll_options_table)
            .where(poll_options_table.c.poll_id.in_(poll_ids))
            .order_by(poll_options_table.c.position)
        )
        result = await self.session.execute(stmt)

        options: dict[UUID, list[PollOption]] = defaultdict(list)
        for row in result.mappings().all():
            options[row["poll_id"]].append(row_to_poll_option(dict(row)))
        return options

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        stmt = select(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        options = await self._fetch_options_for_polls([poll_id])
        return row_to_poll(dict(row), options.get(poll_id, []))

    async def find_all(self, status: Optional[PollStatus] = None) -> list[Poll]:
        stmt = select(polls_table)
        if status:
            stmt = stmt.where(polls_table.c.status == status.value)
        stmt = stmt.order_by(polls_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        options = await self._fetch_options_for_polls([row["id"] for row in rows])
        return [row_to_poll(row, options.get(row["id"], [])) for row in rows]

    async def save(self, poll: Poll) -> Poll:
        """Save a poll.

        New polls are inserted with their options. Existing polls only have
        their poll-level fields updated.
        """
        with logfire.span("poll_repository.save", poll_id=str(poll.id)):
            exists = await self.session.execute(
                select(polls_table.c.id).where(polls_table.c.id == poll.id)
            )
            poll_dict = poll_to_dict(poll)

            if exists.first():
                stmt = (
                    polls_table.update()
                    .where(polls_table.c.id == poll.id)
                    .values(
                        question=poll_dict["question"],
                        target_levels=poll_dict["target_levels"],
                        allow_multiple_votes=poll_dict["allow_multiple_votes"],
                        status=poll_dict["status"],
                        closed_at=poll_dict["closed_at"],
                    )
                )
                await self.session.execute(stmt)
            else:
                await self.session.execute(polls_table.insert().values(**poll_dict))
                await self.session.execute(
                    poll_options_table.insert(), poll_options_to_dicts(poll)
                )

            await self.session.flush()
            saved = await self.find_by_id(poll.id)
            return saved or poll

    async def increment_option_votes(
        self, poll_id: PollId, option_id: PollOptionId
    ) -> None:
        """Atomically increment an option's vote counter."""
        stmt = (
            poll_options_table.update()
            .where(
                and_(
                    poll_options_table.c.id == option_id,
                    poll_options_table.c.poll_id == poll_id,
                )
            )
            .values(votes=poll_options_table.c.votes + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_option_votes(
        self, poll_id: PollId, option_id: PollOptionId, votes: int
    ) -> None:
        stmt = (
            poll_options_table.update()
            .where(
                and_(
                    poll_options_table.c.id == option_id,
                    poll_options_table.c.poll_id == poll_id,
                )
            )
            .values(votes=votes)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_status(self) -> dict[PollStatus, int]:
        stmt = select(polls_table.c.status, func.count()).group_by(polls_table.c.status)
        result = await self.session.execute(stmt)
        counts = {status: 0 for status in PollStatus}
        for status, count in result.all():
            counts[PollStatus(status)] = count
        return counts


class PostgresPollVoteRepository(PollVoteRepository):
    """PostgreSQL implementation of PollVoteRepository.

    ``add`` skips rows that collide with either the per-option unique
    constraint or the partial unique index on exclusive votes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, vote: PollVote) -> bool:
        stmt = (
            insert(poll_votes_table)
            .values(**poll_vote_to_dict(vote))
            .on_conflict_do_nothing()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def find_option_ids_by_user(
        self, user_id: UserId, poll_ids: Sequence[PollId]
    ) -> dict[PollId, set[PollOptionId]]:
        if not poll_ids:
            return {}

        stmt = select(poll_votes_table.c.poll_id, poll_votes_table.c.option_id).where(
            and_(
                poll_votes_table.c.user_id == user_id,
                poll_votes_table.c.poll_id.in_(poll_ids),
            )
        )
        result = await self.session.execute(stmt)

        voted: dict[PollId, set[PollOptionId]] = defaultdict(set)
        for row in result.fetchall():
            voted[PollId(row.poll_id)].add(PollOptionId(row.option_id))
        return dict(voted)

    async def count_by_option(self) -> dict[PollOptionId, int]:
        stmt = select(poll_votes_table.c.option_id, func.count()).group_by(
            poll_votes_table.c.option_id
        )
        result = await self.session.execute(stmt)
        return {PollOptionId(option_id): count for option_id, count in result.all()}

    async def count_all(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(poll_votes_table)
        )
        return result.scalar_one()
