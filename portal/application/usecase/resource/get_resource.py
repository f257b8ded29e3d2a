"""Get learning resource use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import ResourceItem
from portal.domain.service import ResourceService
from portal.domain.value import ResourceId


class GetResourceRequest(BaseModel):
    resource_id: str  # UUID string


class GetResourceResponse(BaseModel):
    resource: ResourceItem


class GetResourceUseCase:
    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: GetResourceRequest) -> GetResourceResponse:
        resource = await self.resource_service.get_resource(
            ResourceId(UUID(request.resource_id))
        )
        return GetResourceResponse(resource=ResourceItem.from_resource(resource))
