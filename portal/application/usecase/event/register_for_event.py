"""Register for event use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import EventRegistrationItem
from portal.domain.model import Principal
from portal.domain.service import EventService
from portal.domain.value import EventId


class RegisterForEventRequest(BaseModel):
    actor: Principal
    event_id: str  # UUID string


class RegisterForEventResponse(BaseModel):
    registration: EventRegistrationItem
    created: bool
    message: str


class RegisterForEventUseCase:
    """Use case for taking a place at an event. Repeating it is a no-op."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: RegisterForEventRequest) -> RegisterForEventResponse:
        """Execute registration flow.

        Raises:
            NotFoundError: If the event does not exist
            EventFullError: If every place is taken
        """
        registration, created = await self.event_service.register(
            EventId(UUID(request.event_id)), request.actor.id
        )
        return RegisterForEventResponse(
            registration=EventRegistrationItem.from_registration(registration),
            created=created,
            message=(
                "Successfully registered for event"
                if created
                else "Already registered for event"
            ),
        )
