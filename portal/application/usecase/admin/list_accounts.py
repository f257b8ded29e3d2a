"""List accounts use case."""

from pydantic import BaseModel

from portal.application.usecase.common import AccountItem
from portal.domain.model import Principal
from portal.domain.service import AccountService
from portal.domain.value import ApprovalStatus


class ListAccountsRequest(BaseModel):
    actor: Principal
    status: ApprovalStatus = ApprovalStatus.PENDING


class ListAccountsResponse(BaseModel):
    users: list[AccountItem]
    total: int


class ListAccountsUseCase:
    """Use case for listing accounts by approval status (admin tier)."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        accounts = await self.account_service.list_by_status(
            request.actor, request.status
        )
        return ListAccountsResponse(
            users=[AccountItem.from_account(account) for account in accounts],
            total=len(accounts),
        )
