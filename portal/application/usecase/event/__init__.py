"""Event use cases."""

from .create_event import CreateEventUseCase
from .delete_event import DeleteEventUseCase
from .get_event import GetEventUseCase
from .list_events import ListEventsUseCase
from .list_registrations import ListEventRegistrationsUseCase, ListMyRegistrationsUseCase
from .register_for_event import RegisterForEventUseCase
from .update_event import UpdateEventUseCase

__all__ = [
    "CreateEventUseCase",
    "DeleteEventUseCase",
    "GetEventUseCase",
    "ListEventRegistrationsUseCase",
    "ListEventsUseCase",
    "ListMyRegistrationsUseCase",
    "RegisterForEventUseCase",
    "UpdateEventUseCase",
]
