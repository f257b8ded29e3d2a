"""Account notification domain service.

Notifications are a side channel. Messages are queued on the request's
AfterCommit hooks, so nothing is sent for a change that fails to commit,
and a failure to send is logged and swallowed.
"""

from abc import ABC, abstractmethod
from functools import partial

import logfire

from portal.domain.model import Account
from portal.domain.value import ApprovalStatus, Role
from portal.domain.value.common import ValueObject

from .after_commit import AfterCommit
from .base import Service


class EmailMessage(ValueObject):
    """Outbound email."""

    to: str
    subject: str
    text: str
    html: str | None = None


class EmailSender(ABC):
    """Generic outbound email interface."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver a message.

        Args:
            message: Message to deliver

        Raises:
            Exception: Implementation-specific delivery failure
        """
        pass


_ROLE_LABELS = {
    Role.STUDENT: "Student",
    Role.ALUMNUS: "Alumnus",
    Role.ADMIN: "Administrator",
    Role.SUPER_ADMIN: "Super Administrator",
}


class NotificationService(Service):
    """Composes and sends account lifecycle emails."""

    def __init__(self, email_sender: EmailSender, after_commit: AfterCommit) -> None:
        self.email_sender = email_sender
        self.after_commit = after_commit

    def registration_received(self, account: Account) -> None:
        """Tell a new registrant their account awaits approval."""
        self._queue(
            EmailMessage(
                to=account.email,
                subject="Registration received - pending approval",
                text=(
                    f"Hello {account.first_name},\n\n"
                    "Thank you for registering. Your account is pending approval "
                    "by an administrator. You will receive another email once it "
                    "has been reviewed."
                ),
            ),
            event="registration_received",
        )

    def approval_decided(self, account: Account) -> None:
        """Tell an account holder the outcome of their review."""
        if account.approval_status == ApprovalStatus.APPROVED:
            subject = "Your account has been approved"
            body = "Your account has been approved. You can now log in."
        else:
            subject = "Your account registration was not approved"
            body = (
                "Your account registration was not approved. Contact the "
                "department if you believe this is a mistake."
            )
        self._queue(
            EmailMessage(
                to=account.email,
                subject=subject,
                text=f"Hello {account.first_name},\n\n{body}",
            ),
            event="approval_decided",
        )

    def role_changed(self, account: Account) -> None:
        label = _ROLE_LABELS[account.role]
        self._queue(
            EmailMessage(
                to=account.email,
                subject="Your account role has changed",
                text=(
                    f"Hello {account.first_name},\n\n"
                    f"Your role on the portal is now: {label}."
                ),
            ),
            event="role_changed",
        )

    def password_reset(self, account: Account, reset_link: str) -> None:
        self._queue(
            EmailMessage(
                to=account.email,
                subject="Reset your password",
                text=(
                    f"Hello {account.first_name},\n\n"
                    "We received a request to reset your password. Use the link "
                    f"below within the next hour:\n\n{reset_link}\n\n"
                    "If you did not request this, you can ignore this email."
                ),
            ),
            event="password_reset",
        )

    def account_not_found(self, email: str) -> None:
        """Tell someone who requested a reset that no account uses their email."""
        self._queue(
            EmailMessage(
                to=email,
                subject="Password reset request",
                text=(
                    "Someone asked to reset the password for this email address, "
                    "but no portal account is registered with it. If this was you, "
                    "you may register a new account."
                ),
            ),
            event="account_not_found",
        )

    def _queue(self, message: EmailMessage, event: str) -> None:
        self.after_commit.add(partial(self._deliver, message, event))
        logfire.debug("Notification queued", notification=event)

    async def _deliver(self, message: EmailMessage, event: str) -> bool:
        with logfire.span("notification_service.deliver", notification=event):
            try:
                await self.email_sender.send(message)
            except Exception as e:
                logfire.error(
                    "Notification delivery failed",
                    notification=event,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return False
            logfire.info("Notification delivered", notification=event)
            return True
