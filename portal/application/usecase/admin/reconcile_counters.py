"""Reconcile counters use case."""

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import AccessService, EngagementService, ReconciliationReport


class ReconcileCountersRequest(BaseModel):
    actor: Principal


class ReconcileCountersResponse(BaseModel):
    report: ReconciliationReport
    total_fixed: int


class ReconcileCountersUseCase:
    """Use case for recomputing derived counters (super_admin only)."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(
        self, request: ReconcileCountersRequest
    ) -> ReconcileCountersResponse:
        AccessService.require_super_admin(request.actor)
        report = await self.engagement_service.reconcile_counters()
        return ReconcileCountersResponse(report=report, total_fixed=report.total_fixed)
