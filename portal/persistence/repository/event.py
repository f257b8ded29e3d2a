"""PostgreSQL implementations of the event repositories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Event, EventRegistration
from portal.domain.repository import EventRegistrationRepository, EventRepository
from portal.domain.value import EventId, RegistrationStatus, UserId
from portal.persistence.mappers import (
    event_registration_to_dict,
    event_to_dict,
    row_to_event,
    row_to_event_registration,
)
from portal.persistence.tables import event_registrations_table, events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def find_all(self, limit: int = 20, offset: int = 0) -> list[Event]:
        stmt = (
            select(events_table)
            .order_by(events_table.c.date.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def find_recent(self, limit: int) -> list[Event]:
        stmt = select(events_table).order_by(events_table.c.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def save(self, event: Event) -> Event:
        existing = await self.find_by_id(event.id)
        event_dict = event_to_dict(event)

        if existing:
            stmt = (
                events_table.update()
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = events_table.insert().values(**event_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return event

    async def delete(self, event_id: EventId) -> None:
        stmt = delete(events_table).where(events_table.c.id == event_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(events_table))
        return result.scalar_one()


class PostgresEventRegistrationRepository(EventRegistrationRepository):
    """PostgreSQL implementation of EventRegistrationRepository.

    ``add`` relies on the (user_id, event_id) unique constraint, so
    concurrent registrations by the same user create one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, registration: EventRegistration) -> bool:
        stmt = (
            insert(event_registrations_table)
            .values(**event_registration_to_dict(registration))
            .on_conflict_do_nothing(constraint="uq_user_event_registration")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1  # type: ignore[attr-defined]

    async def find(self, user_id: UserId, event_id: EventId) -> Optional[EventRegistration]:
        stmt = select(event_registrations_table).where(
            and_(
                event_registrations_table.c.user_id == user_id,
                event_registrations_table.c.event_id == event_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event_registration(dict(row)) if row else None

    async def find_by_event(self, event_id: EventId) -> list[EventRegistration]:
        stmt = (
            select(event_registrations_table)
            .where(event_registrations_table.c.event_id == event_id)
            .order_by(event_registrations_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_event_registration(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId) -> list[EventRegistration]:
        stmt = (
            select(event_registrations_table)
            .where(event_registrations_table.c.user_id == user_id)
            .order_by(event_registrations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_event_registration(dict(row)) for row in result.mappings().all()]

    async def count_active(self, event_id: EventId) -> int:
        stmt = select(func.count()).where(
            and_(
                event_registrations_table.c.event_id == event_id,
                event_registrations_table.c.status != RegistrationStatus.CANCELLED.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_user(self) -> dict[UUID, int]:
        stmt = (
            select(event_registrations_table.c.user_id, func.count())
            .where(
                event_registrations_table.c.status != RegistrationStatus.CANCELLED.value
            )
            .group_by(event_registrations_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        return {user_id: count for user_id, count in result.all()}

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(event_registrations_table)
        )
        return result.scalar_one()

    async def delete_by_event(self, event_id: EventId) -> None:
        stmt = delete(event_registrations_table).where(
            event_registrations_table.c.event_id == event_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
