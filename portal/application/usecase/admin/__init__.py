"""Administration use cases."""

from .analytics_overview import AnalyticsOverviewUseCase
from .change_role import ChangeRoleUseCase
from .list_accounts import ListAccountsUseCase
from .recent_activity import RecentActivityUseCase
from .reconcile_counters import ReconcileCountersUseCase
from .review_account import ReviewAccountUseCase
from .top_blogs import TopBlogsUseCase

__all__ = [
    "AnalyticsOverviewUseCase",
    "ChangeRoleUseCase",
    "ListAccountsUseCase",
    "RecentActivityUseCase",
    "ReconcileCountersUseCase",
    "ReviewAccountUseCase",
    "TopBlogsUseCase",
]
