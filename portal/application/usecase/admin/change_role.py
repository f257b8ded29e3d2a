"""Change role use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.base import BaseUseCase
from portal.application.usecase.common import AccountItem
from portal.domain.model import Principal
from portal.domain.service import AccountService, NotificationService
from portal.domain.value import Role, UserId


class ChangeRoleRequest(BaseModel):
    actor: Principal
    account_id: str  # UUID string
    role: Role


class ChangeRoleResponse(BaseModel):
    user: AccountItem
    changed: bool


class ChangeRoleUseCase(BaseUseCase):
    """Use case for changing an account's role (super_admin only)."""

    def __init__(
        self,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> None:
        self.account_service = account_service
        self.notification_service = notification_service

    async def execute(self, request: ChangeRoleRequest) -> ChangeRoleResponse:
        account, changed = await self.account_service.change_role(
            request.actor, UserId(UUID(request.account_id)), request.role
        )
        if changed:
            self.notification_service.role_changed(account)
        return ChangeRoleResponse(user=AccountItem.from_account(account), changed=changed)
