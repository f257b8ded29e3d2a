"""Create event use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from portal.application.usecase.common import EventItem
from portal.domain.model import Principal
from portal.domain.service import EventService
from portal.domain.value import EventType


class CreateEventRequest(BaseModel):
    """Create event request."""

    actor: Principal
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


class CreateEventResponse(BaseModel):
    event: EventItem


class CreateEventUseCase:
    """Use case for creating an event (admin tier)."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: CreateEventRequest) -> CreateEventResponse:
        event = await self.event_service.create_event(
            request.actor, **request.model_dump(exclude={"actor"})
        )
        return CreateEventResponse(event=EventItem.from_event(event, registered_count=0))
