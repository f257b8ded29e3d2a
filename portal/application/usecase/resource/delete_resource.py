"""Delete learning resource use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import ResourceService
from portal.domain.value import ResourceId


class DeleteResourceRequest(BaseModel):
    actor: Principal
    resource_id: str  # UUID string


class DeleteResourceResponse(BaseModel):
    success: bool = True
    message: str = "Learning resource deleted"


class DeleteResourceUseCase:
    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: DeleteResourceRequest) -> DeleteResourceResponse:
        await self.resource_service.delete_resource(
            ResourceId(UUID(request.resource_id)), request.actor
        )
        return DeleteResourceResponse()
