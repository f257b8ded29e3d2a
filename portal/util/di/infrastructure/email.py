"""Email infrastructure providers."""

from dishka import Scope, provide

from portal.adapter.email import SmtpEmailSender
from portal.config import EmailSettings
from portal.domain.service import EmailSender
from portal.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider (SMTP relay)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide SMTP email sender."""
        return SmtpEmailSender(settings=email_settings)
