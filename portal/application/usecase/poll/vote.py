"""Vote use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import PollItem
from portal.domain.model import Principal
from portal.domain.service import AccountService, PollService
from portal.domain.value import PollId, PollOptionId


class VoteRequest(BaseModel):
    """Vote request."""

    actor: Principal
    poll_id: str  # UUID string
    option_id: str  # UUID string


class VoteResponse(BaseModel):
    poll: PollItem
    message: str = "Vote recorded"


class VoteUseCase:
    """Use case for casting a poll vote."""

    def __init__(
        self, poll_service: PollService, account_service: AccountService
    ) -> None:
        """Initialize vote use case.

        Args:
            poll_service: Poll domain service
            account_service: Account service (the voter's level)
        """
        self.poll_service = poll_service
        self.account_service = account_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the poll does not exist
            PollClosedError: If the poll is closed
            EligibilityError: If the voter's level is not targeted
            InvalidOptionError: If the option is not on the poll
            DuplicateVoteError: If the voter already voted
        """
        voter = await self.account_service.get_account(request.actor.id)
        poll = await self.poll_service.vote(
            PollId(UUID(request.poll_id)), PollOptionId(UUID(request.option_id)), voter
        )

        voted = await self.poll_service.voted_options(voter.id, [poll.id])
        options = voted.get(poll.id, set())
        return VoteResponse(
            poll=PollItem.from_poll(
                poll, options, PollService.can_vote(poll, voter, options)
            )
        )
