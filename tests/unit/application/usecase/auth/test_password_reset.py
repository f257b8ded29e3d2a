"""Unit tests for the password reset use cases."""

from urllib.parse import parse_qs, urlparse

import pytest

from portal.adapter.email import MockEmailSender
from portal.application.usecase.auth import (
    LoginUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from portal.application.usecase.auth.login import LoginRequest
from portal.application.usecase.auth.request_password_reset import (
    RequestPasswordResetRequest,
)
from portal.application.usecase.auth.reset_password import ResetPasswordRequest
from portal.domain.error import AuthenticationError, ValidationError
from portal.domain.service import JWTService
from tests.harness import (
    DEFAULT_PASSWORD,
    create_env_fixture,
    run_after_commit,
    seed_account,
)

# Unit test fixture
unit_env = create_env_fixture()

NEW_PASSWORD = "a-brand-new-password"


def token_from(message) -> str:
    link = next(line for line in message.text.splitlines() if "token=" in line)
    return parse_qs(urlparse(link.strip()).query)["token"][0]


class TestRequestPasswordReset:
    @pytest.mark.asyncio
    async def test_same_response_for_known_and_unknown_email(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        sender = await unit_env.get(MockEmailSender)
        await seed_account(unit_env, email="known@example.com")

        known = await use_case.execute(
            RequestPasswordResetRequest(email="known@example.com")
        )
        unknown = await use_case.execute(
            RequestPasswordResetRequest(email="unknown@example.com")
        )

        assert known == unknown
        await run_after_commit(unit_env)
        assert [m.to for m in sender.outbox] == [
            "known@example.com",
            "unknown@example.com",
        ]
        assert "token=" in sender.outbox[0].text
        assert "token=" not in sender.outbox[1].text

    @pytest.mark.asyncio
    async def test_malformed_email_sends_nothing(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        sender = await unit_env.get(MockEmailSender)

        await use_case.execute(RequestPasswordResetRequest(email="not-an-email"))
        await run_after_commit(unit_env)

        assert sender.outbox == []


class TestResetPassword:
    @pytest.mark.asyncio
    async def test_reset_token_redeems_once(self, unit_env):
        # Arrange
        request_reset = await unit_env.get(RequestPasswordResetUseCase)
        reset = await unit_env.get(ResetPasswordUseCase)
        login = await unit_env.get(LoginUseCase)
        sender = await unit_env.get(MockEmailSender)
        await seed_account(unit_env, email="me@example.com")
        await request_reset.execute(RequestPasswordResetRequest(email="me@example.com"))
        await run_after_commit(unit_env)
        token = token_from(sender.outbox[0])

        # Act
        await reset.execute(ResetPasswordRequest(token=token, password=NEW_PASSWORD))

        # Assert
        await login.execute(LoginRequest(email="me@example.com", password=NEW_PASSWORD))
        with pytest.raises(AuthenticationError):
            await login.execute(
                LoginRequest(email="me@example.com", password=DEFAULT_PASSWORD)
            )
        with pytest.raises(ValidationError, match="reset token"):
            await reset.execute(
                ResetPasswordRequest(token=token, password="yet-another-password")
            )

    @pytest.mark.asyncio
    async def test_session_token_cannot_reset_password(self, unit_env):
        reset = await unit_env.get(ResetPasswordUseCase)
        jwt_service = await unit_env.get(JWTService)
        account = await seed_account(unit_env)

        with pytest.raises(ValidationError, match="reset token"):
            await reset.execute(
                ResetPasswordRequest(
                    token=jwt_service.create_session_token(account),
                    password=NEW_PASSWORD,
                )
            )

    @pytest.mark.asyncio
    async def test_new_password_must_meet_length_rules(self, unit_env):
        request_reset = await unit_env.get(RequestPasswordResetUseCase)
        reset = await unit_env.get(ResetPasswordUseCase)
        sender = await unit_env.get(MockEmailSender)
        await seed_account(unit_env, email="me@example.com")
        await request_reset.execute(RequestPasswordResetRequest(email="me@example.com"))
        await run_after_commit(unit_env)

        with pytest.raises(ValidationError, match="at least"):
            await reset.execute(
                ResetPasswordRequest(token=token_from(sender.outbox[0]), password="short")
            )
