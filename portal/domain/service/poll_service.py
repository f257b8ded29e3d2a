"""Poll domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from portal.domain.error import (
    DuplicateVoteError,
    EligibilityError,
    InvalidOptionError,
    NotFoundError,
    PollClosedError,
    ValidationError,
)
from portal.domain.model import Account, Poll, PollOption, PollVote, Principal
from portal.domain.model.common import utcnow
from portal.domain.model.poll import MAX_POLL_OPTIONS, MIN_POLL_OPTIONS
from portal.domain.repository import PollRepository, PollVoteRepository
from portal.domain.value import (
    PollId,
    PollOptionId,
    PollStatus,
    PollVoteId,
    UserId,
    normalize_level,
)

from .access_service import AccessService
from .base import Service


class PollService(Service):
    """Domain service for polls: creation, eligibility-checked voting and
    closing."""

    def __init__(
        self, poll_repository: PollRepository, poll_vote_repository: PollVoteRepository
    ) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
            poll_vote_repository: Poll vote repository
        """
        self.poll_repository = poll_repository
        self.poll_vote_repository = poll_vote_repository

    async def create_poll(
        self,
        actor: Principal,
        question: str,
        options: Sequence[str],
        target_levels: Sequence[str] = (),
        allow_multiple_votes: bool = False,
    ) -> Poll:
        """Create an active poll (admin tier).

        Args:
            actor: Calling principal
            question: Poll question
            options: Option texts (2-10, distinct)
            target_levels: Academic levels allowed to vote (empty = all)
            allow_multiple_votes: Whether a user may vote for several options

        Returns:
            Created poll

        Raises:
            AuthorizationError: If the actor is not in the admin tier
            ValidationError: If question or options are invalid
        """
        with logfire.span("poll_service.create_poll", actor_id=str(actor.id)):
            AccessService.require_admin(actor)

            question = question.strip()
            if not question:
                raise ValidationError("Question is required")

            texts = [text.strip() for text in options]
            if any(not text for text in texts):
                raise ValidationError("Poll options cannot be empty")
            if not MIN_POLL_OPTIONS <= len(texts) <= MAX_POLL_OPTIONS:
                raise ValidationError(
                    f"A poll needs between {MIN_POLL_OPTIONS} and {MAX_POLL_OPTIONS} options"
                )
            if len({text.lower() for text in texts}) != len(texts):
                raise ValidationError("Poll options must be distinct")

            levels = []
            for level in target_levels:
                if normalize_level(level) is None:
                    raise ValidationError("Target levels cannot be empty")
                levels.append(level.strip())

            poll = Poll(
                id=PollId(uuid4()),
                question=question,
                options=[
                    PollOption(id=PollOptionId(uuid4()), text=text) for text in texts
                ],
                target_levels=levels,
                allow_multiple_votes=allow_multiple_votes,
                created_by=actor.id,
            )
            saved = await self.poll_repository.save(poll)
            logfire.info("Poll created", poll_id=str(saved.id), options=len(texts))
            return saved

    async def get_poll(self, poll_id: PollId) -> Poll:
        poll = await self.poll_repository.find_by_id(poll_id)
        if not poll:
            raise NotFoundError("Poll", str(poll_id))
        return poll

    async def list_polls(self, status: Optional[PollStatus] = None) -> list[Poll]:
        return await self.poll_repository.find_all(status)

    async def vote(
        self, poll_id: PollId, option_id: PollOptionId, voter: Account
    ) -> Poll:
        """Cast a vote.

        Checks run in order: poll open, voter eligible, option belongs to
        the poll, no prior vote (single-vote polls). The vote fact and the
        option counter are written in the caller's transaction.

        Args:
            poll_id: Poll ID
            option_id: Chosen option
            voter: Voting account (its level drives eligibility)

        Returns:
            The poll with updated counts

        Raises:
            NotFoundError: If the poll does not exist
            PollClosedError: If the poll is closed
            EligibilityError: If the voter's level is not targeted
            InvalidOptionError: If the option is not on the poll
            DuplicateVoteError: If the voter already voted
        """
        with logfire.span(
            "poll_service.vote",
            poll_id=str(poll_id),
            option_id=str(option_id),
            user_id=str(voter.id),
        ):
            poll = await self.get_poll(poll_id)

            if not poll.is_active:
                logfire.info("Vote on closed poll")
                raise PollClosedError("This poll is closed")

            if not poll.accepts_level(voter.level):
                logfire.info("Vote from ineligible level", level=voter.level)
                raise EligibilityError("You are not eligible to vote in this poll")

            option = poll.get_option(option_id)
            if not option:
                raise InvalidOptionError("Option does not belong to this poll")

            previous = await self.poll_vote_repository.find_option_ids_by_user(
                voter.id, [poll.id]
            )
            voted = previous.get(poll.id, set())
            if voted and (not poll.allow_multiple_votes or option.id in voted):
                logfire.info("Duplicate vote attempt")
                raise DuplicateVoteError("You have already voted in this poll")

            created = await self.poll_vote_repository.add(
                PollVote(
                    id=PollVoteId(uuid4()),
                    poll_id=poll.id,
                    option_id=option.id,
                    user_id=voter.id,
                    exclusive=not poll.allow_multiple_votes,
                )
            )
            if not created:
                # Concurrent duplicate caught by the unique index
                logfire.warn("Duplicate vote rejected by storage")
                raise DuplicateVoteError("You have already voted in this poll")

            await self.poll_repository.increment_option_votes(poll.id, option.id)
            logfire.info("Vote recorded")
            return await self.get_poll(poll.id)

    async def close_poll(self, actor: Principal, poll_id: PollId) -> Poll:
        """Close a poll (admin tier). Closing a closed poll is a no-op."""
        with logfire.span("poll_service.close_poll", poll_id=str(poll_id)):
            AccessService.require_admin(actor)

            poll = await self.get_poll(poll_id)
            if not poll.is_active:
                return poll

            closed = await self.poll_repository.save(
                poll.model_copy(
                    update={"status": PollStatus.CLOSED, "closed_at": utcnow()}
                )
            )
            logfire.info("Poll closed", poll_id=str(poll_id))
            return closed

    async def voted_options(
        self, user_id: UserId | None, poll_ids: Sequence[PollId]
    ) -> dict[PollId, set[PollOptionId]]:
        if user_id is None or not poll_ids:
            return {}
        return await self.poll_vote_repository.find_option_ids_by_user(
            user_id, poll_ids
        )

    @staticmethod
    def can_vote(
        poll: Poll, voter: Account | None, voted: set[PollOptionId]
    ) -> bool:
        """Whether ``voter`` could cast a (further) vote right now."""
        if voter is None or not poll.is_active or not poll.accepts_level(voter.level):
            return False
        if poll.allow_multiple_votes:
            return len(voted) < len(poll.options)
        return not voted
