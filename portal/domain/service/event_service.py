"""Event domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from portal.domain.error import EventFullError, NotFoundError
from portal.domain.model import Account, Event, EventRegistration, Principal
from portal.domain.model.common import utcnow
from portal.domain.repository import (
    AccountRepository,
    EventRegistrationRepository,
    EventRepository,
)
from portal.domain.value import EventId, EventRegistrationId, UserId

from .access_service import AccessService
from .base import Service

EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "date",
        "time",
        "location",
        "type",
        "capacity",
        "price",
        "tags",
        "image_url",
        "image_urls",
    }
)


class EventService(Service):
    """Domain service for events and registrations.

    Events are managed by the admin tier. Any approved user may register;
    a registration is unique per (user, event) and registering twice
    returns the existing place.
    """

    def __init__(
        self,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
        account_repository: AccountRepository,
    ) -> None:
        self.event_repository = event_repository
        self.registration_repository = registration_repository
        self.account_repository = account_repository

    async def create_event(self, actor: Principal, **fields: object) -> Event:
        """Create an event organized by the actor (admin tier).

        Raises:
            AuthorizationError: If the actor is not in the admin tier
        """
        with logfire.span("event_service.create_event", actor_id=str(actor.id)):
            AccessService.require_admin(actor)
            event = Event(
                id=EventId(uuid4()),
                organizer_id=actor.id,
                **{k: v for k, v in fields.items() if k in EDITABLE_FIELDS},
            )
            saved = await self.event_repository.save(event)
            logfire.info("Event created", event_id=str(saved.id))
            return saved

    async def get_event(self, event_id: EventId) -> Event:
        event = await self.event_repository.find_by_id(event_id)
        if not event:
            raise NotFoundError("Event", str(event_id))
        return event

    async def list_events(self, limit: int = 20, offset: int = 0) -> list[Event]:
        return await self.event_repository.find_all(limit=limit, offset=offset)

    async def update_event(
        self, event_id: EventId, actor: Principal, changes: dict[str, object]
    ) -> Event:
        """Edit an event (admin tier).

        Raises:
            AuthorizationError: If the actor is not in the admin tier
            NotFoundError: If the event does not exist
        """
        with logfire.span("event_service.update_event", event_id=str(event_id)):
            AccessService.require_admin(actor)
            event = await self.get_event(event_id)
            allowed = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
            updated = Event.model_validate(
                {**event.model_dump(), **allowed, "updated_at": utcnow()}
            )
            return await self.event_repository.save(updated)

    async def delete_event(self, event_id: EventId, actor: Principal) -> None:
        """Delete an event and its registrations (admin tier)."""
        with logfire.span("event_service.delete_event", event_id=str(event_id)):
            AccessService.require_admin(actor)
            await self.get_event(event_id)
            await self.registration_repository.delete_by_event(event_id)
            await self.event_repository.delete(event_id)
            logfire.info("Event deleted", event_id=str(event_id))

    async def register(
        self, event_id: EventId, user_id: UserId
    ) -> tuple[EventRegistration, bool]:
        """Register a user for an event.

        Returns:
            The user's registration and whether it was created by this call

        Raises:
            NotFoundError: If the event does not exist
            EventFullError: If every place is taken
        """
        with logfire.span(
            "event_service.register", event_id=str(event_id), user_id=str(user_id)
        ):
            event = await self.get_event(event_id)

            existing = await self.registration_repository.find(user_id, event_id)
            if existing:
                logfire.info("Registration already recorded")
                return existing, False

            taken = await self.registration_repository.count_active(event_id)
            if taken >= event.capacity:
                logfire.info("Event full", capacity=event.capacity)
                raise EventFullError(f"{event.title} is fully booked")

            registration = EventRegistration(
                id=EventRegistrationId(uuid4()), user_id=user_id, event_id=event_id
            )
            created = await self.registration_repository.add(registration)
            if not created:
                # Lost a race with a concurrent registration by the same user
                stored = await self.registration_repository.find(user_id, event_id)
                return stored or registration, False

            logfire.info("Registered for event", registration_id=str(registration.id))
            return registration, True

    async def registration_count(self, event_id: EventId) -> int:
        return await self.registration_repository.count_active(event_id)

    async def list_registrations(
        self, event_id: EventId, actor: Principal
    ) -> list[tuple[EventRegistration, Optional[Account]]]:
        """List an event's registrations with the registered accounts (admin tier).

        The account is None when it no longer exists.
        """
        AccessService.require_admin(actor)
        await self.get_event(event_id)
        registrations = await self.registration_repository.find_by_event(event_id)
        return [
            (registration, await self.account_repository.find_by_id(registration.user_id))
            for registration in registrations
        ]

    async def registrations_of(self, user_id: UserId) -> list[EventRegistration]:
        return await self.registration_repository.find_by_user(user_id)
