"""List events use case."""

from pydantic import BaseModel, Field

from portal.application.usecase.common import EventItem
from portal.domain.service import EventService


class ListEventsRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListEventsResponse(BaseModel):
    events: list[EventItem]


class ListEventsUseCase:
    """Use case for browsing events, latest date first."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: ListEventsRequest) -> ListEventsResponse:
        events = await self.event_service.list_events(request.limit, request.offset)
        return ListEventsResponse(events=[EventItem.from_event(e) for e in events])
