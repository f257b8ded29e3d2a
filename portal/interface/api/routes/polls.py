"""Poll routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from portal.application.usecase.poll import (
    ClosePollUseCase,
    CreatePollUseCase,
    GetPollUseCase,
    ListPollsUseCase,
    VoteUseCase,
)
from portal.application.usecase.poll.close_poll import (
    ClosePollRequest,
    ClosePollResponse,
)
from portal.application.usecase.poll.create_poll import (
    CreatePollRequest,
    CreatePollResponse,
)
from portal.application.usecase.poll.get_poll import GetPollRequest, GetPollResponse
from portal.application.usecase.poll.list_polls import (
    ListPollsRequest,
    ListPollsResponse,
)
from portal.application.usecase.poll.vote import VoteRequest, VoteResponse
from portal.domain.value import PollStatus
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/polls", tags=["polls"], route_class=DishkaRoute)


class CreatePollAPIRequest(BaseModel):
    """API request for creating a poll."""

    question: str = Field(min_length=1, max_length=500)
    options: list[str]
    target_levels: list[str] = Field(default_factory=list)
    allow_multiple_votes: bool = False


class VoteAPIRequest(BaseModel):
    option_id: UUID


@router.post("", response_model=CreatePollResponse, status_code=status.HTTP_201_CREATED)
async def create_poll(
    request: CreatePollAPIRequest,
    create_poll_use_case: FromDishka[CreatePollUseCase],
    session: FromDishka[RequestSession],
) -> CreatePollResponse:
    """Create a poll (admin tier).

    Example:
        POST /polls
        {
            "question": "Best day for the departmental week?",
            "options": ["Monday", "Friday"],
            "target_levels": ["300", "400"]
        }
    """
    actor = await session.principal()
    return await create_poll_use_case.execute(
        CreatePollRequest(actor=actor, **request.model_dump())
    )


@router.get("", response_model=ListPollsResponse)
async def list_polls(
    list_polls_use_case: FromDishka[ListPollsUseCase],
    session: FromDishka[RequestSession],
    status: Optional[PollStatus] = None,
) -> ListPollsResponse:
    """List polls, newest first, with the caller's voting state."""
    viewer = await session.optional_principal()
    return await list_polls_use_case.execute(
        ListPollsRequest(viewer=viewer, status=status)
    )


@router.get("/{poll_id}", response_model=GetPollResponse)
async def get_poll(
    poll_id: UUID,
    get_poll_use_case: FromDishka[GetPollUseCase],
    session: FromDishka[RequestSession],
) -> GetPollResponse:
    """Read a poll with tallies and the caller's voting state."""
    viewer = await session.optional_principal()
    return await get_poll_use_case.execute(
        GetPollRequest(poll_id=str(poll_id), viewer=viewer)
    )


@router.post("/{poll_id}/vote", response_model=VoteResponse)
async def vote(
    poll_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    session: FromDishka[RequestSession],
) -> VoteResponse:
    """Cast a vote.

    Rejected with 400 when the poll is closed, the caller's level is not
    targeted, the option is not on the poll, or the caller already voted.
    """
    actor = await session.principal()
    return await vote_use_case.execute(
        VoteRequest(actor=actor, poll_id=str(poll_id), option_id=str(request.option_id))
    )


@router.post("/{poll_id}/close", response_model=ClosePollResponse)
async def close_poll(
    poll_id: UUID,
    close_poll_use_case: FromDishka[ClosePollUseCase],
    session: FromDishka[RequestSession],
) -> ClosePollResponse:
    """Close a poll (admin tier)."""
    actor = await session.principal()
    return await close_poll_use_case.execute(
        ClosePollRequest(actor=actor, poll_id=str(poll_id))
    )
