"""Review account use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.base import BaseUseCase
from portal.application.usecase.common import AccountItem
from portal.domain.model import Principal
from portal.domain.service import AccountService, NotificationService
from portal.domain.value import ApprovalStatus, UserId


class ReviewAccountRequest(BaseModel):
    """Approval decision request."""

    actor: Principal
    account_id: str  # UUID string
    status: ApprovalStatus


class ReviewAccountResponse(BaseModel):
    user: AccountItem
    changed: bool
    message: str


class ReviewAccountUseCase(BaseUseCase):
    """Use case for approving or rejecting an account."""

    def __init__(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize review account use case.

        Args:
            account_service: Account domain service
            notification_service: Account notification service
        """
        self.account_service = account_service
        self.notification_service = notification_service

    async def execute(self, request: ReviewAccountRequest) -> ReviewAccountResponse:
        """Execute review flow.

        Steps:
        1. Apply the decision (role gates live in the account service)
        2. Queue an email to the account holder when the status actually changed

        Raises:
            AuthorizationError: If the actor may not make this decision
            ValidationError: If the target status is not a decision
            NotFoundError: If the account does not exist
        """
        account, changed = await self.account_service.review(
            request.actor, UserId(UUID(request.account_id)), request.status
        )
        if changed:
            self.notification_service.approval_decided(account)

        message = (
            f"Account {account.approval_status.value}"
            if changed
            else f"Account already {account.approval_status.value}"
        )
        return ReviewAccountResponse(
            user=AccountItem.from_account(account), changed=changed, message=message
        )
