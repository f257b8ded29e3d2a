"""Poll aggregate.

A poll owns its options; each option carries a running vote count that
is kept equal to the number of vote facts for it. The poll total is
always computed from the options, never stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import (
    PollId,
    PollOptionId,
    PollStatus,
    PollVoteId,
    UserId,
    normalize_level,
)

MIN_POLL_OPTIONS = 2
MAX_POLL_OPTIONS = 10


class PollOption(DomainModel):
    """Answer option with its vote counter."""

    id: PollOptionId
    text: str = Field(min_length=1, max_length=200)
    votes: int = Field(default=0, ge=0)


class Poll(DomainModel):
    """Poll aggregate root.

    Business rules:
    - 2-10 options
    - only active polls accept votes
    - target_levels restricts voters by academic level (empty = everyone)
    - one vote per user unless allow_multiple_votes is set, in which case
      one vote per user per option
    """

    id: PollId
    question: str = Field(min_length=1, max_length=500)
    options: list[PollOption] = Field(
        min_length=MIN_POLL_OPTIONS, max_length=MAX_POLL_OPTIONS
    )
    target_levels: list[str] = Field(default_factory=list)
    allow_multiple_votes: bool = False
    status: PollStatus = PollStatus.ACTIVE
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    closed_at: Optional[datetime] = None

    @property
    def total_votes(self) -> int:
        return sum(option.votes for option in self.options)

    @property
    def is_active(self) -> bool:
        return self.status == PollStatus.ACTIVE

    def get_option(self, option_id: PollOptionId) -> Optional[PollOption]:
        for option in self.options:
            if str(option.id) == str(option_id):
                return option
        return None

    def accepts_level(self, level: Optional[str]) -> bool:
        """Check whether a voter at ``level`` is eligible."""
        if not self.target_levels:
            return True
        allowed = {normalize_level(target) for target in self.target_levels}
        voter_level = normalize_level(level)
        return voter_level is not None and voter_level in allowed


class PollVote(DomainModel):
    """One user's vote for one option.

    ``exclusive`` mirrors ``not poll.allow_multiple_votes`` so storage can
    enforce one exclusive vote per (poll, user).
    """

    id: PollVoteId
    poll_id: PollId
    option_id: PollOptionId
    user_id: UserId
    exclusive: bool = True
    created_at: datetime = Field(default_factory=utcnow)
