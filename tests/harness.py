"""Test harness for unit, integration and API tests.

Integration tests assume a PostgreSQL database is reachable with the
settings loaded from environment variables (configure via .env or export).
"""

from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer
from fastapi.testclient import TestClient
import pytest_asyncio

from portal.domain.model import Account, Principal
from portal.domain.repository import AccountRepository
from portal.domain.service import AfterCommit, PasswordService
from portal.domain.value import ApprovalStatus, Role, UserId
from portal.util.di import Component
from tests.di import build_test_container

DEFAULT_PASSWORD = "correct-horse-battery"


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register(unit_env):
            service = await unit_env.get(AccountService)
            account = await service.register(NewAccountDetails(...))
            assert account.approval_status == ApprovalStatus.PENDING
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def seed_account(
    env: AsyncContainer,
    role: Role = Role.STUDENT,
    approval_status: ApprovalStatus = ApprovalStatus.APPROVED,
    email: Optional[str] = None,
    password: str = DEFAULT_PASSWORD,
    level: Optional[str] = None,
) -> Account:
    """Store an account directly, bypassing registration and review.

    Args:
        env: Request-scoped container
        role: Role to give the account
        approval_status: Approval state to give the account
        email: Email (random when omitted)
        password: Plaintext password to hash
        level: Academic level

    Returns:
        The stored account
    """
    passwords = await env.get(PasswordService)
    accounts = await env.get(AccountRepository)
    account = Account(
        id=UserId(uuid4()),
        email=email or f"{role.value}-{uuid4().hex[:8]}@example.com",
        password_hash=await passwords.hash(password),
        first_name="Test",
        last_name=role.value.replace("_", " ").title(),
        role=role,
        approval_status=approval_status,
        level=level,
    )
    return await accounts.save(account)


def principal_for(account: Account) -> Principal:
    """Build the principal a session token for ``account`` would resolve to."""
    return Principal(id=account.id, email=account.email, role=account.role)


def bearer(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> dict:
    """Log in through the API and return an Authorization header.

    The session cookie set by the login is dropped so the header is the
    only credential the client sends.
    """
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['token']}"}


async def run_after_commit(env: AsyncContainer) -> None:
    """Run the hooks queued for after the request commits.

    Unit tests stay inside one request scope, so work such as notification
    emails is only delivered once this is called.
    """
    await (await env.get(AfterCommit)).run()
