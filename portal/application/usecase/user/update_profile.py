"""Update profile use case."""

from typing import Any

from pydantic import BaseModel

from portal.application.usecase.common import AccountItem
from portal.domain.model import Principal
from portal.domain.service import AccountService


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    ``changes`` is the raw body; fields outside the editable allow-list
    are dropped by the account service.
    """

    actor: Principal
    changes: dict[str, Any]


class UpdateProfileResponse(BaseModel):
    user: AccountItem
    message: str = "Profile updated successfully"


class UpdateProfileUseCase:
    """Use case for the caller editing their own profile."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        account = await self.account_service.update_profile(
            request.actor.id, request.changes
        )
        return UpdateProfileResponse(user=AccountItem.from_account(account))
