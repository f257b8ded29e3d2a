"""Get poll use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import PollItem
from portal.domain.model import Account, Principal
from portal.domain.service import AccountService, PollService
from portal.domain.value import PollId


class GetPollRequest(BaseModel):
    poll_id: str  # UUID string
    viewer: Optional[Principal] = None


class GetPollResponse(BaseModel):
    poll: PollItem


class GetPollUseCase:
    """Use case for reading a poll with tallies and the viewer's state."""

    def __init__(
        self, poll_service: PollService, account_service: AccountService
    ) -> None:
        self.poll_service = poll_service
        self.account_service = account_service

    async def execute(self, request: GetPollRequest) -> GetPollResponse:
        poll = await self.poll_service.get_poll(PollId(UUID(request.poll_id)))

        voter: Optional[Account] = None
        if request.viewer:
            voter = await self.account_service.get_account(request.viewer.id)

        voted = await self.poll_service.voted_options(
            voter.id if voter else None, [poll.id]
        )
        options = voted.get(poll.id, set())
        return GetPollResponse(
            poll=PollItem.from_poll(
                poll, options, PollService.can_vote(poll, voter, options)
            )
        )
