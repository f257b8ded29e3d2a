"""Unit tests for NotificationService, AfterCommit and PasswordService."""

import pytest

from portal.adapter.email import MockEmailSender
from portal.domain.service import (
    AfterCommit,
    EmailSender,
    NotificationService,
    PasswordService,
)
from portal.domain.value import ApprovalStatus, Role
from tests.harness import create_env_fixture, run_after_commit, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationService:
    @pytest.mark.asyncio
    async def test_approval_email_goes_to_account(self, unit_env):
        notifications = await unit_env.get(NotificationService)
        outbox = (await unit_env.get(MockEmailSender)).outbox
        account = await seed_account(unit_env, email="ada@example.com")

        notifications.approval_decided(account)
        assert outbox == []
        await run_after_commit(unit_env)

        assert outbox[0].to == "ada@example.com"
        assert "approved" in outbox[0].subject

    @pytest.mark.asyncio
    async def test_rejection_email(self, unit_env):
        notifications = await unit_env.get(NotificationService)
        outbox = (await unit_env.get(MockEmailSender)).outbox
        account = await seed_account(
            unit_env, approval_status=ApprovalStatus.REJECTED
        )

        notifications.approval_decided(account)
        await run_after_commit(unit_env)

        assert "not approved" in outbox[0].subject

    @pytest.mark.asyncio
    async def test_role_label_in_role_change_email(self, unit_env):
        notifications = await unit_env.get(NotificationService)
        outbox = (await unit_env.get(MockEmailSender)).outbox
        account = await seed_account(unit_env, role=Role.SUPER_ADMIN)

        notifications.role_changed(account)
        await run_after_commit(unit_env)

        assert "Super Administrator" in outbox[0].text

    @pytest.mark.asyncio
    async def test_delivery_failure_is_swallowed(self, unit_env):
        """A broken relay never fails the action that triggered the email."""
        sender = await unit_env.get(MockEmailSender)
        notifications = await unit_env.get(NotificationService)
        account = await seed_account(unit_env)
        sender.fail = True

        notifications.registration_received(account)
        await run_after_commit(unit_env)

        assert sender.outbox == []

    @pytest.mark.asyncio
    async def test_discarded_hooks_send_nothing(self, unit_env):
        notifications = await unit_env.get(NotificationService)
        after_commit = await unit_env.get(AfterCommit)
        outbox = (await unit_env.get(MockEmailSender)).outbox
        account = await seed_account(unit_env)

        notifications.registration_received(account)
        after_commit.discard()
        await after_commit.run()

        assert outbox == []

    def test_email_sender_is_abstract(self):
        with pytest.raises(TypeError):
            EmailSender()


class TestAfterCommit:
    @pytest.mark.asyncio
    async def test_hooks_run_once_in_order(self):
        after_commit = AfterCommit()
        calls: list[str] = []

        async def record(name: str) -> None:
            calls.append(name)

        after_commit.add(lambda: record("first"))
        after_commit.add(lambda: record("second"))
        assert len(after_commit) == 2

        await after_commit.run()
        await after_commit.run()

        assert calls == ["first", "second"]
        assert len(after_commit) == 0


class TestPasswordService:
    @pytest.mark.asyncio
    async def test_hash_and_verify(self, unit_env):
        passwords = await unit_env.get(PasswordService)

        password_hash = await passwords.hash("s3cret-value")

        assert password_hash != "s3cret-value"
        assert await passwords.verify("s3cret-value", password_hash) is True
        assert await passwords.verify("other-value", password_hash) is False

    @pytest.mark.asyncio
    async def test_missing_hash_never_verifies(self, unit_env):
        passwords = await unit_env.get(PasswordService)

        assert await passwords.verify("anything", None) is False

    @pytest.mark.asyncio
    async def test_malformed_hash_never_verifies(self, unit_env):
        passwords = await unit_env.get(PasswordService)

        assert await passwords.verify("anything", "not-a-bcrypt-hash") is False

    @pytest.mark.asyncio
    async def test_fingerprint_changes_with_hash(self, unit_env):
        passwords = await unit_env.get(PasswordService)

        first = passwords.fingerprint(await passwords.hash("one-password"))
        second = passwords.fingerprint(await passwords.hash("one-password"))

        assert first != second
