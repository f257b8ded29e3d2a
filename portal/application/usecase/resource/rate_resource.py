"""Rate learning resource use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.application.usecase.common import ResourceItem
from portal.domain.model import Principal
from portal.domain.service import ResourceService
from portal.domain.value import ResourceId


class RateResourceRequest(BaseModel):
    actor: Principal
    resource_id: str  # UUID string
    rating: int  # range checked by the domain service


class RateResourceResponse(BaseModel):
    resource: ResourceItem
    your_rating: int


class RateResourceUseCase:
    """Use case for rating a resource. A second rating replaces the first."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: RateResourceRequest) -> RateResourceResponse:
        """Execute rating flow.

        Raises:
            ValidationError: If the rating is outside 1-5
            NotFoundError: If the resource does not exist
        """
        resource = await self.resource_service.rate(
            ResourceId(UUID(request.resource_id)), request.actor.id, request.rating
        )
        return RateResourceResponse(
            resource=ResourceItem.from_resource(resource), your_rating=request.rating
        )
