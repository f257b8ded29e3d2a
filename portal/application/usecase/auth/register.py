"""Register use case."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.application.usecase.common import AccountItem
from portal.domain.service import AccountService, NewAccountDetails, NotificationService
from portal.domain.value import CampusLocation, Gender

REGISTRATION_MESSAGE = (
    "Registration successful. Your account is pending approval by an administrator."
)


class RegisterRequest(BaseModel):
    """Registration request.

    Only these fields are read; anything else in the body (role,
    approval_status, ...) is ignored.
    """

    email: str
    password: str = Field(repr=False)
    first_name: str
    last_name: str
    matric_number: Optional[str] = None
    gender: Optional[Gender] = None
    location: Optional[CampusLocation] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    level: Optional[str] = None
    occupation: Optional[str] = None
    profile_image_url: Optional[str] = None


class RegisterResponse(BaseModel):
    """Register response."""

    user: AccountItem
    message: str = REGISTRATION_MESSAGE


class RegisterUseCase:
    """Use case for self-registration of a new account."""

    def __init__(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
            notification_service: Account notification service
        """
        self.account_service = account_service
        self.notification_service = notification_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Validate input and uniqueness, create a pending student account
        2. Queue the "approval pending" email, sent once the account commits

        Raises:
            ValidationError: If input is invalid
            ConflictError: If email or matric number is taken
        """
        account = await self.account_service.register(
            NewAccountDetails(**request.model_dump())
        )
        self.notification_service.registration_received(account)
        return RegisterResponse(user=AccountItem.from_account(account))
