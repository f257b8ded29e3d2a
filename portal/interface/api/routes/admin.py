"""Administration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from portal.application.usecase.admin import (
    AnalyticsOverviewUseCase,
    ChangeRoleUseCase,
    ListAccountsUseCase,
    RecentActivityUseCase,
    ReconcileCountersUseCase,
    ReviewAccountUseCase,
    TopBlogsUseCase,
)
from portal.application.usecase.admin.analytics_overview import (
    AnalyticsOverviewRequest,
    AnalyticsOverviewResponse,
)
from portal.application.usecase.admin.change_role import (
    ChangeRoleRequest,
    ChangeRoleResponse,
)
from portal.application.usecase.admin.list_accounts import (
    ListAccountsRequest,
    ListAccountsResponse,
)
from portal.application.usecase.admin.recent_activity import (
    RecentActivityRequest,
    RecentActivityResponse,
)
from portal.application.usecase.admin.reconcile_counters import (
    ReconcileCountersRequest,
    ReconcileCountersResponse,
)
from portal.application.usecase.admin.review_account import (
    ReviewAccountRequest,
    ReviewAccountResponse,
)
from portal.application.usecase.admin.top_blogs import (
    TopBlogsRequest,
    TopBlogsResponse,
)
from portal.domain.value import ApprovalStatus, Role
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ReviewAccountAPIRequest(BaseModel):
    """API request for an approval decision."""

    status: ApprovalStatus


class ChangeRoleAPIRequest(BaseModel):
    """API request for a role change."""

    role: Role


@router.get("/users", response_model=ListAccountsResponse)
async def list_accounts(
    list_accounts_use_case: FromDishka[ListAccountsUseCase],
    session: FromDishka[RequestSession],
    status: ApprovalStatus = ApprovalStatus.PENDING,
) -> ListAccountsResponse:
    """List accounts by approval status (admin tier). Defaults to pending."""
    actor = await session.principal()
    return await list_accounts_use_case.execute(
        ListAccountsRequest(actor=actor, status=status)
    )


@router.put("/users/{account_id}/approval", response_model=ReviewAccountResponse)
async def review_account(
    account_id: UUID,
    request: ReviewAccountAPIRequest,
    review_account_use_case: FromDishka[ReviewAccountUseCase],
    session: FromDishka[RequestSession],
) -> ReviewAccountResponse:
    """Approve or reject an account.

    Deciding a pending account needs the admin tier; changing an existing
    decision needs super_admin.

    Example:
        PUT /admin/users/{id}/approval
        {"status": "approved"}
    """
    actor = await session.principal()
    return await review_account_use_case.execute(
        ReviewAccountRequest(
            actor=actor, account_id=str(account_id), status=request.status
        )
    )


@router.put("/users/{account_id}/role", response_model=ChangeRoleResponse)
async def change_role(
    account_id: UUID,
    request: ChangeRoleAPIRequest,
    change_role_use_case: FromDishka[ChangeRoleUseCase],
    session: FromDishka[RequestSession],
) -> ChangeRoleResponse:
    """Change an account's role (super_admin only)."""
    actor = await session.principal()
    return await change_role_use_case.execute(
        ChangeRoleRequest(actor=actor, account_id=str(account_id), role=request.role)
    )


@router.get("/analytics/overview", response_model=AnalyticsOverviewResponse)
async def analytics_overview(
    analytics_overview_use_case: FromDishka[AnalyticsOverviewUseCase],
    session: FromDishka[RequestSession],
) -> AnalyticsOverviewResponse:
    """Portal-wide counts (admin tier)."""
    actor = await session.principal()
    return await analytics_overview_use_case.execute(
        AnalyticsOverviewRequest(actor=actor)
    )


@router.get("/analytics/top-blogs", response_model=TopBlogsResponse)
async def top_blogs(
    top_blogs_use_case: FromDishka[TopBlogsUseCase],
    session: FromDishka[RequestSession],
) -> TopBlogsResponse:
    """The five most viewed published posts (admin tier)."""
    actor = await session.principal()
    return await top_blogs_use_case.execute(TopBlogsRequest(actor=actor))


@router.get("/analytics/recent-activity", response_model=RecentActivityResponse)
async def recent_activity(
    recent_activity_use_case: FromDishka[RecentActivityUseCase],
    session: FromDishka[RequestSession],
) -> RecentActivityResponse:
    """Latest members, posts, events and resources, newest first (admin tier)."""
    actor = await session.principal()
    return await recent_activity_use_case.execute(
        RecentActivityRequest(actor=actor)
    )


@router.post("/maintenance/reconcile", response_model=ReconcileCountersResponse)
async def reconcile_counters(
    reconcile_counters_use_case: FromDishka[ReconcileCountersUseCase],
    session: FromDishka[RequestSession],
) -> ReconcileCountersResponse:
    """Recompute cached counters from the engagement facts (super_admin)."""
    actor = await session.principal()
    return await reconcile_counters_use_case.execute(
        ReconcileCountersRequest(actor=actor)
    )
