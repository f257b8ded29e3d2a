"""Mock email provider for testing."""

from dishka import Scope, provide

from portal.adapter.email import MockEmailSender
from portal.domain.service import EmailSender
from portal.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider that records messages instead of sending them.

    Tests resolve ``MockEmailSender`` to inspect the outbox.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_mock_sender(self) -> MockEmailSender:
        return MockEmailSender()

    @provide
    def get_email_sender(self, sender: MockEmailSender) -> EmailSender:
        """Provide the recording sender as the email sender."""
        return sender
