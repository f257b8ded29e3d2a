"""Unit tests for the register and login use cases."""

import pytest

from portal.adapter.email import MockEmailSender
from portal.application.usecase.auth import LoginUseCase, RegisterUseCase
from portal.application.usecase.auth.login import LoginRequest
from portal.application.usecase.auth.register import RegisterRequest
from portal.domain.error import PendingApprovalError
from portal.domain.service import AccessService
from portal.domain.value import ApprovalStatus, Role
from tests.di import build_test_container
from tests.harness import DEFAULT_PASSWORD, create_env_fixture, run_after_commit, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    @pytest.mark.asyncio
    async def test_register_returns_pending_account_and_emails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        sender = await unit_env.get(MockEmailSender)

        # Act
        response = await use_case.execute(
            RegisterRequest(
                email="new@example.com",
                password=DEFAULT_PASSWORD,
                first_name="New",
                last_name="Student",
                matric_number="SOC/22/010",
            )
        )

        # Assert
        assert response.user.approval_status == ApprovalStatus.PENDING
        assert response.user.role == Role.STUDENT
        assert "pending approval" in response.message
        assert sender.outbox == []
        assert "password_hash" not in response.user.model_dump()
        await run_after_commit(unit_env)
        assert [m.to for m in sender.outbox] == ["new@example.com"]

    @pytest.mark.asyncio
    async def test_registration_survives_email_outage(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        sender = await unit_env.get(MockEmailSender)
        sender.fail = True

        response = await use_case.execute(
            RegisterRequest(
                email="offline@example.com",
                password=DEFAULT_PASSWORD,
                first_name="Off",
                last_name="Line",
            )
        )

        await run_after_commit(unit_env)

        assert response.user.email == "offline@example.com"
        assert sender.outbox == []


class TestRegistrationEmailDelivery:
    """The confirmation email follows the request outcome."""

    @staticmethod
    def _request(email: str) -> RegisterRequest:
        return RegisterRequest(
            email=email,
            password=DEFAULT_PASSWORD,
            first_name="Scope",
            last_name="Test",
        )

    @pytest.mark.asyncio
    async def test_email_sent_when_request_completes(self):
        container = build_test_container()
        try:
            async with container() as env:
                use_case = await env.get(RegisterUseCase)
                await use_case.execute(self._request("done@example.com"))

            sender = await container.get(MockEmailSender)
            assert [m.to for m in sender.outbox] == ["done@example.com"]
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_no_email_when_request_fails_after_registering(self):
        container = build_test_container()
        try:
            with pytest.raises(RuntimeError):
                async with container() as env:
                    use_case = await env.get(RegisterUseCase)
                    await use_case.execute(self._request("lost@example.com"))
                    raise RuntimeError("later step failed")

            sender = await container.get(MockEmailSender)
            assert sender.outbox == []
        finally:
            await container.close()


class TestLoginUseCase:
    @pytest.mark.asyncio
    async def test_login_returns_working_session_token(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)
        access = await unit_env.get(AccessService)
        account = await seed_account(unit_env, email="me@example.com")

        response = await use_case.execute(
            LoginRequest(email="me@example.com", password=DEFAULT_PASSWORD)
        )

        principal = await access.authenticate(response.token)
        assert principal.id == account.id
        assert response.user.id == str(account.id)

    @pytest.mark.asyncio
    async def test_pending_account_gets_pending_error(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)
        await seed_account(
            unit_env, email="wait@example.com", approval_status=ApprovalStatus.PENDING
        )

        with pytest.raises(PendingApprovalError):
            await use_case.execute(
                LoginRequest(email="wait@example.com", password=DEFAULT_PASSWORD)
            )
