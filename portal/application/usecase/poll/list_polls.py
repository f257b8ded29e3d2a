"""List polls use case."""

from typing import Optional

from pydantic import BaseModel

from portal.application.usecase.common import PollItem
from portal.domain.model import Account, Principal
from portal.domain.service import AccountService, PollService
from portal.domain.value import PollStatus


class ListPollsRequest(BaseModel):
    viewer: Optional[Principal] = None
    status: Optional[PollStatus] = None


class ListPollsResponse(BaseModel):
    polls: list[PollItem]


class ListPollsUseCase:
    """Use case for listing polls with the viewer's voting state."""

    def __init__(
        self, poll_service: PollService, account_service: AccountService
    ) -> None:
        """Initialize list polls use case.

        Args:
            poll_service: Poll domain service
            account_service: Account service (viewer's level for eligibility)
        """
        self.poll_service = poll_service
        self.account_service = account_service

    async def execute(self, request: ListPollsRequest) -> ListPollsResponse:
        polls = await self.poll_service.list_polls(request.status)

        voter: Optional[Account] = None
        if request.viewer:
            voter = await self.account_service.get_account(request.viewer.id)

        voted = await self.poll_service.voted_options(
            voter.id if voter else None, [poll.id for poll in polls]
        )
        return ListPollsResponse(
            polls=[
                PollItem.from_poll(
                    poll,
                    voted.get(poll.id, set()),
                    PollService.can_vote(poll, voter, voted.get(poll.id, set())),
                )
                for poll in polls
            ]
        )
