"""Event repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal.domain.model.event import Event, EventRegistration
from portal.domain.value import EventId, UserId


class EventRepository(ABC):
    """Repository for Event entity."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> list[Event]:
        """Find events, latest date first."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int) -> list[Event]:
        """Find the most recently created events."""
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class EventRegistrationRepository(ABC):
    """Registration ledger.

    Uniqueness of (user, event) is enforced by storage, not by a read
    before the write.
    """

    @abstractmethod
    async def add(self, registration: EventRegistration) -> bool:
        """Insert a registration unless the user is already registered.

        Returns:
            True if a row was created, False if it already existed
        """
        pass

    @abstractmethod
    async def find(self, user_id: UserId, event_id: EventId) -> Optional[EventRegistration]:
        pass

    @abstractmethod
    async def find_by_event(self, event_id: EventId) -> list[EventRegistration]:
        """Registrations for an event, oldest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[EventRegistration]:
        """A user's registrations, newest first."""
        pass

    @abstractmethod
    async def count_active(self, event_id: EventId) -> int:
        """Count registrations that are not cancelled."""
        pass

    @abstractmethod
    async def count_by_user(self) -> dict[UUID, int]:
        """Count registrations per user, cancelled ones excluded."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: EventId) -> None:
        pass
