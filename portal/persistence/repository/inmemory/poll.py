"""In-memory poll and poll vote repositories for testing."""

from typing import Optional, Sequence

from portal.domain.model import Poll, PollVote
from portal.domain.repository import PollRepository, PollVoteRepository
from portal.domain.value import PollId, PollOptionId, PollStatus, UserId


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[PollId, Poll] = {}

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        return self._polls.get(poll_id)

    async def find_all(self, status: Optional[PollStatus] = None) -> list[Poll]:
        polls = [p for p in self._polls.values() if status is None or p.status == status]
        return sorted(polls, key=lambda p: p.created_at, reverse=True)

    async def save(self, poll: Poll) -> Poll:
        """Save a poll, keeping stored option counters of an existing one."""
        existing = self._polls.get(poll.id)
        if existing:
            poll = poll.model_copy(update={"options": existing.options})
        self._polls[poll.id] = poll
        return poll

    async def increment_option_votes(
        self, poll_id: PollId, option_id: PollOptionId
    ) -> None:
        poll = self._polls.get(poll_id)
        option = poll.get_option(option_id) if poll else None
        if poll and option:
            await self.set_option_votes(poll_id, option_id, option.votes + 1)

    async def set_option_votes(
        self, poll_id: PollId, option_id: PollOptionId, votes: int
    ) -> None:
        poll = self._polls.get(poll_id)
        if not poll:
            return
        options = [
            o.model_copy(update={"votes": votes}) if o.id == option_id else o
            for o in poll.options
        ]
        self._polls[poll_id] = poll.model_copy(update={"options": options})

    async def count_by_status(self) -> dict[PollStatus, int]:
        counts = {status: 0 for status in PollStatus}
        for poll in self._polls.values():
            counts[poll.status] += 1
        return counts


class InMemoryPollVoteRepository(PollVoteRepository):
    """In-memory implementation of PollVoteRepository for testing.

    Mirrors the storage rules: one vote per (poll, user, option), and one
    exclusive vote per (poll, user).
    """

    def __init__(self) -> None:
        self._votes: list[PollVote] = []

    async def add(self, vote: PollVote) -> bool:
        for existing in self._votes:
            if existing.poll_id != vote.poll_id or existing.user_id != vote.user_id:
                continue
            if existing.option_id == vote.option_id:
                return False
            if existing.exclusive and vote.exclusive:
                return False
        self._votes.append(vote)
        return True

    async def find_option_ids_by_user(
        self, user_id: UserId, poll_ids: Sequence[PollId]
    ) -> dict[PollId, set[PollOptionId]]:
        wanted = set(poll_ids)
        voted: dict[PollId, set[PollOptionId]] = {}
        for vote in self._votes:
            if vote.user_id == user_id and vote.poll_id in wanted:
                voted.setdefault(vote.poll_id, set()).add(vote.option_id)
        return voted

    async def count_by_option(self) -> dict[PollOptionId, int]:
        counts: dict[PollOptionId, int] = {}
        for vote in self._votes:
            counts[vote.option_id] = counts.get(vote.option_id, 0) + 1
        return counts

    async def count_all(self) -> int:
        return len(self._votes)
