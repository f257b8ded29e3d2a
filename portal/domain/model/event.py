"""Department event and event registration."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import (
    EventId,
    EventRegistrationId,
    EventType,
    RegistrationStatus,
    UserId,
)


class Event(DomainModel):
    """Workshop, seminar or other department event.

    Registrations are counted from the registration ledger, so the event
    itself carries no attendee counter.
    """

    id: EventId
    organizer_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    date: datetime
    time: str = Field(min_length=1, max_length=50)  # display time, e.g. "14:00"
    location: str = Field(min_length=1, max_length=300)
    type: EventType
    capacity: int = Field(ge=1)
    price: int = Field(default=0, ge=0)  # cents, 0 for free
    tags: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class EventRegistration(DomainModel):
    """A user's place at an event, unique per (user, event)."""

    id: EventRegistrationId
    user_id: UserId
    event_id: EventId
    status: RegistrationStatus = RegistrationStatus.REGISTERED
    created_at: datetime = Field(default_factory=utcnow)
