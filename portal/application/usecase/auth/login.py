"""Login use case."""

from pydantic import BaseModel, Field

from portal.application.usecase.common import AccountItem
from portal.domain.service import AccountService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str = Field(repr=False)


class LoginResponse(BaseModel):
    """Login response.

    The token is also set as the session cookie by the route.
    """

    user: AccountItem
    token: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If email or password is wrong
            PendingApprovalError: If the account is not approved
        """
        account = await self.account_service.authenticate(
            request.email, request.password
        )
        token = self.jwt_service.create_session_token(account)
        return LoginResponse(user=AccountItem.from_account(account), token=token)
