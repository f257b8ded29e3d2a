"""Request password reset use case."""

import logfire
from pydantic import BaseModel

from portal.config import Settings
from portal.domain.service import (
    AccountService,
    JWTService,
    NotificationService,
    PasswordService,
)
from portal.domain.value import Email

RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent."
)


class RequestPasswordResetRequest(BaseModel):
    email: str


class RequestPasswordResetResponse(BaseModel):
    message: str = RESET_REQUESTED_MESSAGE


class RequestPasswordResetUseCase:
    """Use case for starting a password reset.

    The response is identical whether or not the email is registered.
    """

    def __init__(
        self,
        account_service: AccountService,
        password_service: PasswordService,
        jwt_service: JWTService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize request password reset use case.

        Args:
            account_service: Account domain service
            password_service: Password service (hash fingerprint)
            jwt_service: JWT token domain service
            notification_service: Account notification service
            settings: Application settings (frontend URL)
        """
        self.account_service = account_service
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: RequestPasswordResetRequest
    ) -> RequestPasswordResetResponse:
        """Execute password reset request flow.

        Steps:
        1. Look up the account by email
        2. Known: mint a reset token bound to the current password hash and
           email the reset link
        3. Unknown but well-formed: email an "account not found" notice
        """
        with logfire.span("request_password_reset"):
            account = await self.account_service.find_by_email(request.email)

            if account:
                token = self.jwt_service.create_reset_token(
                    account, self.password_service.fingerprint(account.password_hash)
                )
                link = f"{self.settings.api.frontend_url}/reset-password?token={token}"
                self.notification_service.password_reset(account, link)
            else:
                try:
                    email = Email(request.email).root
                except ValueError:
                    logfire.info("Password reset for malformed email")
                else:
                    self.notification_service.account_not_found(email)

            return RequestPasswordResetResponse()
