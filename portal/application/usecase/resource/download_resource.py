"""Record resource download use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.model import Principal
from portal.domain.service import ResourceService
from portal.domain.value import ResourceId


class DownloadResourceRequest(BaseModel):
    actor: Principal
    resource_id: str  # UUID string


class DownloadResourceResponse(BaseModel):
    resource_id: str
    downloads: int
    message: str = "Download recorded"


class DownloadResourceUseCase:
    """Use case for counting a download. Every call is one more download."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: DownloadResourceRequest) -> DownloadResourceResponse:
        downloads = await self.resource_service.record_download(
            ResourceId(UUID(request.resource_id)), request.actor.id
        )
        return DownloadResourceResponse(
            resource_id=request.resource_id, downloads=downloads
        )
