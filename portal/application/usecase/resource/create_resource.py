"""Create learning resource use case."""

from typing import Optional

from pydantic import BaseModel, Field

from portal.application.usecase.common import ResourceItem
from portal.domain.model import Principal
from portal.domain.service import ResourceService
from portal.domain.value import Difficulty, ResourceType


class CreateResourceRequest(BaseModel):
    """Create learning resource request."""

    actor: Principal
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = None
    type: ResourceType
    category: str = "general"
    file_url: str = Field(min_length=1)
    file_name: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    difficulty: Optional[Difficulty] = None
    tags: list[str] = Field(default_factory=list)
    preview_available: bool = False
    thumbnail_url: Optional[str] = None


class CreateResourceResponse(BaseModel):
    resource: ResourceItem


class CreateResourceUseCase:
    """Use case for publishing a learning resource (admin tier)."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: CreateResourceRequest) -> CreateResourceResponse:
        resource = await self.resource_service.create_resource(
            request.actor, **request.model_dump(exclude={"actor"})
        )
        return CreateResourceResponse(resource=ResourceItem.from_resource(resource))
