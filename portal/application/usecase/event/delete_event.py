"""Delete event use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import EventService
from portal.domain.value import EventId


class DeleteEventRequest(BaseModel):
    actor: Principal
    event_id: str  # UUID string


class DeleteEventResponse(BaseModel):
    success: bool = True
    message: str = "Event deleted"


class DeleteEventUseCase:
    """Use case for deleting an event with its registrations (admin tier)."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: DeleteEventRequest) -> DeleteEventResponse:
        await self.event_service.delete_event(EventId(UUID(request.event_id)), request.actor)
        return DeleteEventResponse()
