"""Close poll use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import PollItem
from portal.domain.model import Principal
from portal.domain.service import PollService
from portal.domain.value import PollId


class ClosePollRequest(BaseModel):
    actor: Principal
    poll_id: str  # UUID string


class ClosePollResponse(BaseModel):
    poll: PollItem


class ClosePollUseCase:
    """Use case for closing a poll (admin tier)."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: ClosePollRequest) -> ClosePollResponse:
        poll = await self.poll_service.close_poll(
            request.actor, PollId(UUID(request.poll_id))
        )
        return ClosePollResponse(poll=PollItem.from_poll(poll, set(), can_vote=False))
