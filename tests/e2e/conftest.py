"""Fixtures for API tests.

The app runs against the mocked container, so state lives in the
in-memory repositories of one container per test.
"""

import pytest
from fastapi.testclient import TestClient

from portal.adapter.email import MockEmailSender
from portal.domain.model import Account
from portal.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import seed_account


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client bound to the test container."""
    with TestClient(create_app(container)) as client:
        yield client


@pytest.fixture
def seed(client, container):
    """Store an account directly, on the client's event loop."""

    def _seed(**kwargs) -> Account:
        async def _run() -> Account:
            async with container() as env:
                return await seed_account(env, **kwargs)

        return client.portal.call(_run)

    return _seed


@pytest.fixture
def outbox(client, container):
    sender = client.portal.call(container.get, MockEmailSender)
    return sender.outbox
