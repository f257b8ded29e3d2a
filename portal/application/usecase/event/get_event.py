"""Get event use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import EventItem
from portal.domain.service import EventService
from portal.domain.value import EventId


class GetEventRequest(BaseModel):
    event_id: str  # UUID string


class GetEventResponse(BaseModel):
    event: EventItem


class GetEventUseCase:
    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        event_id = EventId(UUID(request.event_id))
        event = await self.event_service.get_event(event_id)
        taken = await self.event_service.registration_count(event_id)
        return GetEventResponse(event=EventItem.from_event(event, registered_count=taken))
