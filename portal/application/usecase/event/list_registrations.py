"""Event registration listing use cases."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import EventRegistrationItem
from portal.domain.model import Principal
from portal.domain.service import EventService
from portal.domain.value import EventId


class ListEventRegistrationsRequest(BaseModel):
    actor: Principal
    event_id: str  # UUID string


class ListEventRegistrationsResponse(BaseModel):
    registrations: list[EventRegistrationItem]
    total: int


class ListEventRegistrationsUseCase:
    """Use case for an event's attendee list (admin tier)."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(
        self, request: ListEventRegistrationsRequest
    ) -> ListEventRegistrationsResponse:
        rows = await self.event_service.list_registrations(
            EventId(UUID(request.event_id)), request.actor
        )
        items = [
            EventRegistrationItem.from_registration(registration, account)
            for registration, account in rows
        ]
        return ListEventRegistrationsResponse(registrations=items, total=len(items))


class ListMyRegistrationsRequest(BaseModel):
    actor: Principal


class ListMyRegistrationsUseCase:
    """Use case for the caller's own event registrations, newest first."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(
        self, request: ListMyRegistrationsRequest
    ) -> ListEventRegistrationsResponse:
        registrations = await self.event_service.registrations_of(request.actor.id)
        items = [EventRegistrationItem.from_registration(r) for r in registrations]
        return ListEventRegistrationsResponse(registrations=items, total=len(items))
