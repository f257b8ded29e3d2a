"""Create poll use case."""

from pydantic import BaseModel, Field

from portal.application.usecase.common import PollItem
from portal.domain.model import Principal
from portal.domain.service import PollService


class CreatePollRequest(BaseModel):
    """Create poll request."""

    actor: Principal
    question: str
    options: list[str]
    target_levels: list[str] = Field(default_factory=list)
    allow_multiple_votes: bool = False


class CreatePollResponse(BaseModel):
    poll: PollItem


class CreatePollUseCase:
    """Use case for creating a poll (admin tier)."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: CreatePollRequest) -> CreatePollResponse:
        poll = await self.poll_service.create_poll(
            request.actor,
            question=request.question,
            options=request.options,
            target_levels=request.target_levels,
            allow_multiple_votes=request.allow_multiple_votes,
        )
        return CreatePollResponse(poll=PollItem.from_poll(poll, set(), can_vote=False))
