"""Get current user use case."""

from pydantic import BaseModel

from portal.application.usecase.common import AccountItem
from portal.domain.model import Principal
from portal.domain.service import AccountService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    actor: Principal


class GetCurrentUserResponse(BaseModel):
    user: AccountItem


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        account = await self.account_service.get_account(request.actor.id)
        return GetCurrentUserResponse(user=AccountItem.from_account(account))
