"""List learning resources use case."""

from typing import Optional

from pydantic import BaseModel

from portal.application.usecase.common import ResourceItem
from portal.domain.service import ResourceService
from portal.domain.value import Difficulty, ResourceType


class ListResourcesRequest(BaseModel):
    category: Optional[str] = None
    type: Optional[ResourceType] = None
    difficulty: Optional[Difficulty] = None


class ListResourcesResponse(BaseModel):
    resources: list[ResourceItem]


class ListResourcesUseCase:
    """Use case for browsing learning resources, newest first."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: ListResourcesRequest) -> ListResourcesResponse:
        resources = await self.resource_service.list_resources(
            request.category, request.type, request.difficulty
        )
        return ListResourcesResponse(
            resources=[ResourceItem.from_resource(r) for r in resources]
        )
