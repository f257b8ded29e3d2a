"""Event routes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, Field

from portal.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    ListEventRegistrationsUseCase,
    ListEventsUseCase,
    ListMyRegistrationsUseCase,
    RegisterForEventUseCase,
    UpdateEventUseCase,
)
from portal.application.usecase.event.create_event import (
    CreateEventRequest,
    CreateEventResponse,
)
from portal.application.usecase.event.delete_event import (
    DeleteEventRequest,
    DeleteEventResponse,
)
from portal.application.usecase.event.get_event import (
    GetEventRequest,
    GetEventResponse,
)
from portal.application.usecase.event.list_events import (
    ListEventsRequest,
    ListEventsResponse,
)
from portal.application.usecase.event.list_registrations import (
    ListEventRegistrationsRequest,
    ListEventRegistrationsResponse,
    ListMyRegistrationsRequest,
)
from portal.application.usecase.event.register_for_event import (
    RegisterForEventRequest,
    RegisterForEventResponse,
)
from portal.application.usecase.event.update_event import (
    UpdateEventRequest,
    UpdateEventResponse,
)
from portal.domain.value import EventType
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)
user_router = APIRouter(prefix="/user", tags=["events"], route_class=DishkaRoute)


class CreateEventAPIRequest(BaseModel):
    """API request for creating an event. ``price`` is in cents."""

    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    date: datetime
    time: str = Field(min_length=1, max_length=50)
    location: str = Field(min_length=1, max_length=300)
    type: EventType
    capacity: int = Field(ge=1)
    price: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)


class UpdateEventAPIRequest(BaseModel):
    """API request for editing an event. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = None
    date: Optional[datetime] = None
    time: Optional[str] = Field(default=None, min_length=1, max_length=50)
    location: Optional[str] = Field(default=None, min_length=1, max_length=300)
    type: Optional[EventType] = None
    capacity: Optional[int] = Field(default=None, ge=1)
    price: Optional[int] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None
    image_url: Optional[str] = None
    image_urls: Optional[list[str]] = None


@router.get("", response_model=ListEventsResponse)
async def list_events(
    list_events_use_case: FromDishka[ListEventsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListEventsResponse:
    """Browse events, latest date first."""
    return await list_events_use_case.execute(
        ListEventsRequest(limit=limit, offset=offset)
    )


@router.post("", response_model=CreateEventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventAPIRequest,
    create_event_use_case: FromDishka[CreateEventUseCase],
    session: FromDishka[RequestSession],
) -> CreateEventResponse:
    """Create an event (admin tier)."""
    actor = await session.principal()
    return await create_event_use_case.execute(
        CreateEventRequest(actor=actor, **request.model_dump())
    )


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: UUID,
    get_event_use_case: FromDishka[GetEventUseCase],
) -> GetEventResponse:
    """Get an event with its number of registrations."""
    return await get_event_use_case.execute(GetEventRequest(event_id=str(event_id)))


@router.put("/{event_id}", response_model=UpdateEventResponse)
async def update_event(
    event_id: UUID,
    request: UpdateEventAPIRequest,
    update_event_use_case: FromDishka[UpdateEventUseCase],
    session: FromDishka[RequestSession],
) -> UpdateEventResponse:
    """Edit an event (admin tier)."""
    actor = await session.principal()
    return await update_event_use_case.execute(
        UpdateEventRequest(
            actor=actor,
            event_id=str(event_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: UUID,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    session: FromDishka[RequestSession],
) -> DeleteEventResponse:
    """Delete an event and its registrations (admin tier)."""
    actor = await session.principal()
    return await delete_event_use_case.execute(
        DeleteEventRequest(actor=actor, event_id=str(event_id))
    )


@router.post(
    "/{event_id}/register",
    response_model=RegisterForEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_for_event(
    event_id: UUID,
    response: Response,
    register_for_event_use_case: FromDishka[RegisterForEventUseCase],
    session: FromDishka[RequestSession],
) -> RegisterForEventResponse:
    """Take a place at an event.

    Answers 201 with the new registration, or 200 with the existing one
    when the caller is already registered. A full event answers 409.
    """
    actor = await session.principal()
    result = await register_for_event_use_case.execute(
        RegisterForEventRequest(actor=actor, event_id=str(event_id))
    )
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return result


@router.get(
    "/{event_id}/registrations", response_model=ListEventRegistrationsResponse
)
async def list_event_registrations(
    event_id: UUID,
    list_event_registrations_use_case: FromDishka[ListEventRegistrationsUseCase],
    session: FromDishka[RequestSession],
) -> ListEventRegistrationsResponse:
    """List who registered for an event (admin tier)."""
    actor = await session.principal()
    return await list_event_registrations_use_case.execute(
        ListEventRegistrationsRequest(actor=actor, event_id=str(event_id))
    )


@user_router.get(
    "/event-registrations", response_model=ListEventRegistrationsResponse
)
async def list_my_registrations(
    list_my_registrations_use_case: FromDishka[ListMyRegistrationsUseCase],
    session: FromDishka[RequestSession],
) -> ListEventRegistrationsResponse:
    """The caller's own event registrations, newest first."""
    actor = await session.principal()
    return await list_my_registrations_use_case.execute(
        ListMyRegistrationsRequest(actor=actor)
    )
