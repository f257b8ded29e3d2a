"""In-memory event repositories for testing."""

from collections import Counter
from typing import Optional
from uuid import UUID

from portal.domain.model import Event, EventRegistration
from portal.domain.repository import EventRegistrationRepository, EventRepository
from portal.domain.value import EventId, RegistrationStatus, UserId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        return self._events.get(event_id)

    async def find_all(self, limit: int = 20, offset: int = 0) -> list[Event]:
        events = sorted(self._events.values(), key=lambda e: e.date, reverse=True)
        return events[offset : offset + limit]

    async def find_recent(self, limit: int) -> list[Event]:
        events = sorted(self._events.values(), key=lambda e: e.created_at, reverse=True)
        return events[:limit]

    async def save(self, event: Event) -> Event:
        self._events[event.id] = event
        return event

    async def delete(self, event_id: EventId) -> None:
        self._events.pop(event_id, None)

    async def count(self) -> int:
        return len(self._events)


class InMemoryEventRegistrationRepository(EventRegistrationRepository):
    """In-memory implementation of EventRegistrationRepository for testing."""

    def __init__(self) -> None:
        self._registrations: dict[tuple[UUID, UUID], EventRegistration] = {}

    async def add(self, registration: EventRegistration) -> bool:
        key = (registration.user_id, registration.event_id)
        if key in self._registrations:
            return False
        self._registrations[key] = registration
        return True

    async def find(self, user_id: UserId, event_id: EventId) -> Optional[EventRegistration]:
        return self._registrations.get((user_id, event_id))

    async def find_by_event(self, event_id: EventId) -> list[EventRegistration]:
        matching = [r for r in self._registrations.values() if r.event_id == event_id]
        return sorted(matching, key=lambda r: r.created_at)

    async def find_by_user(self, user_id: UserId) -> list[EventRegistration]:
        matching = [r for r in self._registrations.values() if r.user_id == user_id]
        return sorted(matching, key=lambda r: r.created_at, reverse=True)

    async def count_active(self, event_id: EventId) -> int:
        return sum(
            1
            for r in self._registrations.values()
            if r.event_id == event_id and r.status != RegistrationStatus.CANCELLED
        )

    async def count_by_user(self) -> dict[UUID, int]:
        return dict(
            Counter(
                r.user_id
                for r in self._registrations.values()
                if r.status != RegistrationStatus.CANCELLED
            )
        )

    async def count(self) -> int:
        return len(self._registrations)

    async def delete_by_event(self, event_id: EventId) -> None:
        self._registrations = {
            key: r for key, r in self._registrations.items() if r.event_id != event_id
        }
