"""Poll repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from portal.domain.model.poll import Poll, PollVote
from portal.domain.value import PollId, PollOptionId, PollStatus, UserId


class PollRepository(ABC):
    """Repository for the Poll aggregate (poll plus its options)."""

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        pass

    @abstractmethod
    async def find_all(self, status: Optional[PollStatus] = None) -> list[Poll]:
        """Find polls, newest first, optionally filtered by status."""
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll.

        Creates the poll with its options, or updates poll-level fields
        (status, closed_at). Option counters are never written by ``save``.
        """
        pass

    @abstractmethod
    async def increment_option_votes(
        self, poll_id: PollId, option_id: PollOptionId
    ) -> None:
        pass

    @abstractmethod
    async def set_option_votes(
        self, poll_id: PollId, option_id: PollOptionId, votes: int
    ) -> None:
        """Overwrite an option counter (reconciliation only)."""
        pass

    @abstractmethod
    async def count_by_status(self) -> dict[PollStatus, int]:
        pass


class PollVoteRepository(ABC):
    """Repository for PollVote facts.

    Storage enforces one vote per (poll, user, option) and, for exclusive
    votes, one vote per (poll, user).
    """

    @abstractmethod
    async def add(self, vote: PollVote) -> bool:
        """Insert a vote unless it collides with an existing one.

        Args:
            vote: The vote fact to insert

        Returns:
            True if a row was created, False on a uniqueness conflict
        """
        pass

    @abstractmethod
    async def find_option_ids_by_user(
        self, user_id: UserId, poll_ids: Sequence[PollId]
    ) -> dict[PollId, set[PollOptionId]]:
        """Find the options a user voted for on each of the given polls.

        Args:
            user_id: The voter's ID
            poll_ids: Polls to check

        Returns:
            Mapping of poll ID to voted option IDs (polls without votes omitted)
        """
        pass

    @abstractmethod
    async def count_by_option(self) -> dict[PollOptionId, int]:
        """Count votes per option (used for reconciliation)."""
        pass

    @abstractmethod
    async def count_all(self) -> int:
        pass
