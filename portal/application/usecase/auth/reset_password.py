"""Reset password use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from portal.domain.error import NotFoundError, ValidationError
from portal.domain.service import AccountService, JWTService, PasswordService
from portal.domain.value import UserId
from portal.util.jwt import JWTError

INVALID_RESET_TOKEN = "Invalid or expired reset token"


class ResetPasswordRequest(BaseModel):
    token: str = Field(repr=False)
    password: str = Field(repr=False)


class ResetPasswordResponse(BaseModel):
    message: str = "Password has been reset successfully"


class ResetPasswordUseCase:
    """Use case for redeeming a password-reset token."""

    def __init__(
        self,
        account_service: AccountService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        self.account_service = account_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: ResetPasswordRequest) -> ResetPasswordResponse:
        """Execute password reset flow.

        The token must be a reset token (session tokens are rejected) and
        its fingerprint must match the stored hash. Setting the new
        password changes the hash, so each token redeems once.

        Raises:
            ValidationError: If the token is invalid, expired or already
                used, or the new password is out of bounds
        """
        with logfire.span("reset_password"):
            try:
                payload = self.jwt_service.verify_reset_token(request.token)
                account_id = UserId(UUID(payload.sub))
            except (JWTError, ValueError) as e:
                logfire.info("Reset token rejected", reason=str(e))
                raise ValidationError(INVALID_RESET_TOKEN)

            try:
                account = await self.account_service.get_account(account_id)
            except NotFoundError:
                raise ValidationError(INVALID_RESET_TOKEN)

            if payload.pwd != self.password_service.fingerprint(account.password_hash):
                logfire.info("Reset token rejected", reason="password changed")
                raise ValidationError(INVALID_RESET_TOKEN)

            await self.account_service.set_password(account, request.password)
            return ResetPasswordResponse()
