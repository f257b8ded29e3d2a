"""Learning resource domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from portal.domain.error import NotFoundError, ValidationError
from portal.domain.model import (
    LearningResource,
    Principal,
    ResourceDownload,
    ResourceRating,
)
from portal.domain.model.common import utcnow
from portal.domain.model.resource import MAX_RATING, MIN_RATING
from portal.domain.repository import (
    LearningResourceRepository,
    ResourceDownloadRepository,
    ResourceRatingRepository,
)
from portal.domain.value import (
    Difficulty,
    ResourceDownloadId,
    ResourceId,
    ResourceRatingId,
    ResourceType,
    UserId,
)

from .access_service import AccessService
from .base import Service

EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "type",
        "category",
        "file_url",
        "file_name",
        "file_size",
        "difficulty",
        "tags",
        "preview_available",
        "thumbnail_url",
    }
)


class ResourceService(Service):
    """Domain service for learning resources, their downloads and ratings."""

    def __init__(
        self,
        resource_repository: LearningResourceRepository,
        download_repository: ResourceDownloadRepository,
        rating_repository: ResourceRatingRepository,
    ) -> None:
        self.resource_repository = resource_repository
        self.download_repository = download_repository
        self.rating_repository = rating_repository

    async def create_resource(
        self, actor: Principal, **fields: object
    ) -> LearningResource:
        """Publish a learning resource (admin tier).

        Raises:
            AuthorizationError: If the actor is not in the admin tier
        """
        with logfire.span("resource_service.create_resource", actor_id=str(actor.id)):
            AccessService.require_admin(actor)
            resource = LearningResource(
                id=ResourceId(uuid4()),
                uploaded_by_id=actor.id,
                **{k: v for k, v in fields.items() if k in EDITABLE_FIELDS},
            )
            saved = await self.resource_repository.save(resource)
            logfire.info("Learning resource created", resource_id=str(saved.id))
            return saved

    async def get_resource(self, resource_id: ResourceId) -> LearningResource:
        resource = await self.resource_repository.find_by_id(resource_id)
        if not resource:
            raise NotFoundError("Learning resource", str(resource_id))
        return resource

    async def list_resources(
        self,
        category: Optional[str] = None,
        resource_type: Optional[ResourceType] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> list[LearningResource]:
        return await self.resource_repository.find_all(category, resource_type, difficulty)

    async def update_resource(
        self, resource_id: ResourceId, actor: Principal, changes: dict[str, object]
    ) -> LearningResource:
        """Edit a resource (uploader or admin tier)."""
        with logfire.span("resource_service.update_resource", resource_id=str(resource_id)):
            resource = await self.get_resource(resource_id)
            AccessService.ensure_owner_or_elevated(
                actor, resource.uploaded_by_id, "learning resource", resource.id
            )
            allowed = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
            updated = LearningResource.model_validate(
                {**resource.model_dump(), **allowed, "updated_at": utcnow()}
            )
            return await self.resource_repository.save(updated)

    async def delete_resource(self, resource_id: ResourceId, actor: Principal) -> None:
        """Delete a resource (uploader or admin tier)."""
        with logfire.span("resource_service.delete_resource", resource_id=str(resource_id)):
            resource = await self.get_resource(resource_id)
            AccessService.ensure_owner_or_elevated(
                actor, resource.uploaded_by_id, "learning resource", resource.id
            )
            await self.download_repository.delete_by_resource(resource_id)
            await self.rating_repository.delete_by_resource(resource_id)
            await self.resource_repository.delete(resource_id)
            logfire.info("Learning resource deleted", resource_id=str(resource_id))

    async def record_download(self, resource_id: ResourceId, user_id: UserId) -> int:
        """Record one download of a resource by a user.

        Every call counts; repeated downloads are separate ledger rows.

        Returns:
            The resource's download count after the call

        Raises:
            NotFoundError: If the resource does not exist
        """
        with logfire.span(
            "resource_service.record_download",
            resource_id=str(resource_id),
            user_id=str(user_id),
        ):
            await self.get_resource(resource_id)
            await self.download_repository.add(
                ResourceDownload(
                    id=ResourceDownloadId(uuid4()),
                    user_id=user_id,
                    resource_id=resource_id,
                )
            )
            return await self.resource_repository.increment_downloads(resource_id)

    async def rate(
        self, resource_id: ResourceId, user_id: UserId, rating: int
    ) -> LearningResource:
        """Rate a resource from 1 to 5 stars, replacing the user's earlier rating.

        The resource's average (stored x 10) and rating count are recomputed
        from the rating rows after the write.

        Raises:
            ValidationError: If the rating is outside 1-5
            NotFoundError: If the resource does not exist
        """
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )

        with logfire.span(
            "resource_service.rate", resource_id=str(resource_id), rating=rating
        ):
            await self.get_resource(resource_id)
            await self.rating_repository.upsert(
                ResourceRating(
                    id=ResourceRatingId(uuid4()),
                    user_id=user_id,
                    resource_id=resource_id,
                    rating=rating,
                )
            )
            average, count = await self.rating_repository.summarize(resource_id)
            await self.resource_repository.set_rating(
                resource_id, round(average * 10), count
            )
            return await self.get_resource(resource_id)
