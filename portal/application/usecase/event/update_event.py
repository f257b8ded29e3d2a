"""Update event use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from portal.application.usecase.common import EventItem
from portal.domain.model import Principal
from portal.domain.service import EventService
from portal.domain.value import EventId, EventType


class UpdateEventRequest(BaseModel):
    """Update event request. Unset fields are left alone."""

    actor: Principal
    event_id: str  # UUID string
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


class UpdateEventResponse(BaseModel):
    event: EventItem


class UpdateEventUseCase:
    """Use case for editing an event (admin tier)."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: UpdateEventRequest) -> UpdateEventResponse:
        changes = {
            k: v
            for k, v in request.model_dump(
                exclude={"actor", "event_id"}, exclude_unset=True
            ).items()
            if v is not None
        }
        event = await self.event_service.update_event(
            EventId(UUID(request.event_id)), request.actor, changes
        )
        return UpdateEventResponse(event=EventItem.from_event(event))
