"""JWT token domain service."""

from datetime import timedelta

import logfire

from portal.config import AuthSettings
from portal.domain.model import Account
from portal.domain.value import TokenPurpose
from portal.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Mints and verifies session and password-reset tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings (signing secret, expiries)
        """
        self.auth_settings = auth_settings

    def create_session_token(self, account: Account) -> str:
        """Create a session token carrying {sub, email, role}.

        Args:
            account: Approved account that just logged in

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_session_token", user_id=str(account.id)):
            return create_token(
                {
                    "sub": str(account.id),
                    "email": account.email,
                    "role": account.role.value,
                },
                purpose=TokenPurpose.SESSION.value,
                expires_in=timedelta(days=self.auth_settings.session_expiry_days),
                settings=self.auth_settings,
            )

    def create_reset_token(self, account: Account, fingerprint: str) -> str:
        """Create a short-lived password-reset token.

        Args:
            account: Account requesting the reset
            fingerprint: Fingerprint of the account's current password hash

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_reset_token", user_id=str(account.id)):
            return create_token(
                {"sub": str(account.id), "email": account.email, "pwd": fingerprint},
                purpose=TokenPurpose.PASSWORD_RESET.value,
                expires_in=timedelta(
                    minutes=self.auth_settings.reset_token_expiry_minutes
                ),
                settings=self.auth_settings,
            )

    def verify_session_token(self, token: str) -> TokenPayload:
        """Verify a session token.

        Raises:
            JWTError: If token is invalid, expired, or not a session token
        """
        return verify_token(token, TokenPurpose.SESSION.value, self.auth_settings)

    def verify_reset_token(self, token: str) -> TokenPayload:
        """Verify a password-reset token.

        Raises:
            JWTError: If token is invalid, expired, or not a reset token
        """
        return verify_token(
            token, TokenPurpose.PASSWORD_RESET.value, self.auth_settings
        )
