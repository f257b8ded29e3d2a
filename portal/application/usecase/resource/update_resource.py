"""Update learning resource use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from portal.application.usecase.common import ResourceItem
from portal.domain.model import Principal
from portal.domain.service import ResourceService
from portal.domain.value import Difficulty, ResourceId, ResourceType


class UpdateResourceRequest(BaseModel):
    """Update learning resource request. Unset fields are left alone."""

    actor: Principal
    resource_id: str  # UUID string
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = None
    type: Optional[ResourceType] = None
    category: Optional[str] = None
    file_url: Optional[str] = Field(default=None, min_length=1)
    file_name: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    difficulty: Optional[Difficulty] = None
    tags: Optional[list[str]] = None
    preview_available: Optional[bool] = None
    thumbnail_url: Optional[str] = None


class UpdateResourceResponse(BaseModel):
    resource: ResourceItem


class UpdateResourceUseCase:
    """Use case for editing a learning resource (uploader or admin tier)."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: UpdateResourceRequest) -> UpdateResourceResponse:
        changes = {
            k: v
            for k, v in request.model_dump(
                exclude={"actor", "resource_id"}, exclude_unset=True
            ).items()
            if v is not None
        }
        resource = await self.resource_service.update_resource(
            ResourceId(UUID(request.resource_id)), request.actor, changes
        )
        return UpdateResourceResponse(resource=ResourceItem.from_resource(resource))
