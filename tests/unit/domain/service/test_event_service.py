"""Unit tests for EventService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from portal.domain.error import AuthorizationError, EventFullError, NotFoundError
from portal.domain.repository import EventRegistrationRepository
from portal.domain.service import EventService
from portal.domain.value import EventId, EventType, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


async def seminar(env, capacity=30, **fields):
    admin = await seed_account(env, role=Role.ADMIN)
    events = await env.get(EventService)
    return await events.create_event(
        principal_for(admin),
        title=fields.pop("title", "Research seminar"),
        date=fields.pop("date", datetime(2026, 11, 20, tzinfo=timezone.utc)),
        time="14:00",
        location="Hall B",
        type=EventType.SEMINAR,
        capacity=capacity,
        **fields,
    )


class TestManageEvents:
    @pytest.mark.asyncio
    async def test_admin_creates_event(self, unit_env):
        event = await seminar(unit_env, price=500)

        assert event.title == "Research seminar"
        assert event.price == 500
        assert event.capacity == 30

    @pytest.mark.asyncio
    async def test_students_cannot_create_events(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)

        with pytest.raises(AuthorizationError):
            await events.create_event(
                principal_for(student),
                title="Party",
                date=datetime(2026, 12, 1, tzinfo=timezone.utc),
                time="20:00",
                location="Common room",
                type=EventType.SOCIAL,
                capacity=50,
            )

    @pytest.mark.asyncio
    async def test_update_ignores_unknown_fields(self, unit_env):
        events = await unit_env.get(EventService)
        admin = principal_for(await seed_account(unit_env, role=Role.SUPER_ADMIN))
        event = await seminar(unit_env)

        updated = await events.update_event(
            event.id, admin, {"location": "Hall C", "organizer_id": admin.id}
        )

        assert updated.location == "Hall C"
        assert updated.organizer_id == event.organizer_id

    @pytest.mark.asyncio
    async def test_delete_removes_registrations(self, unit_env):
        events = await unit_env.get(EventService)
        registrations = await unit_env.get(EventRegistrationRepository)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        student = await seed_account(unit_env)
        event = await seminar(unit_env)
        await events.register(event.id, student.id)

        await events.delete_event(event.id, admin)

        assert await registrations.count() == 0
        with pytest.raises(NotFoundError):
            await events.get_event(event.id)

    @pytest.mark.asyncio
    async def test_events_listed_latest_date_first(self, unit_env):
        events = await unit_env.get(EventService)
        await seminar(unit_env, title="Early", date=datetime(2026, 3, 1, tzinfo=timezone.utc))
        await seminar(unit_env, title="Late", date=datetime(2026, 9, 1, tzinfo=timezone.utc))

        listed = await events.list_events()

        assert [e.title for e in listed] == ["Late", "Early"]


class TestRegister:
    @pytest.mark.asyncio
    async def test_registering_twice_keeps_one_place(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)
        event = await seminar(unit_env)

        first, created = await events.register(event.id, student.id)
        again, created_again = await events.register(event.id, student.id)

        assert created is True
        assert created_again is False
        assert again.id == first.id
        assert await events.registration_count(event.id) == 1

    @pytest.mark.asyncio
    async def test_full_event_rejects_new_registrations(self, unit_env):
        events = await unit_env.get(EventService)
        first = await seed_account(unit_env)
        second = await seed_account(unit_env)
        event = await seminar(unit_env, capacity=1)
        await events.register(event.id, first.id)

        with pytest.raises(EventFullError):
            await events.register(event.id, second.id)

    @pytest.mark.asyncio
    async def test_full_event_still_returns_existing_place(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)
        event = await seminar(unit_env, capacity=1)
        await events.register(event.id, student.id)

        _, created = await events.register(event.id, student.id)

        assert created is False

    @pytest.mark.asyncio
    async def test_register_for_missing_event(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)

        with pytest.raises(NotFoundError):
            await events.register(EventId(uuid4()), student.id)


class TestRegistrations:
    @pytest.mark.asyncio
    async def test_admin_sees_registrants(self, unit_env):
        events = await unit_env.get(EventService)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        student = await seed_account(unit_env, email="ada@example.com")
        event = await seminar(unit_env)
        await events.register(event.id, student.id)

        rows = await events.list_registrations(event.id, admin)

        assert [account.email for _, account in rows] == ["ada@example.com"]

    @pytest.mark.asyncio
    async def test_students_cannot_see_registrants(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)
        event = await seminar(unit_env)

        with pytest.raises(AuthorizationError):
            await events.list_registrations(event.id, principal_for(student))

    @pytest.mark.asyncio
    async def test_registrations_of_user(self, unit_env):
        events = await unit_env.get(EventService)
        student = await seed_account(unit_env)
        first = await seminar(unit_env, title="First")
        second = await seminar(unit_env, title="Second")
        await events.register(first.id, student.id)
        await events.register(second.id, student.id)

        mine = await events.registrations_of(student.id)

        assert {r.event_id for r in mine} == {first.id, second.id}
