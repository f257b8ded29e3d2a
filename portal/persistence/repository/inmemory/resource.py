"""In-memory learning resource repositories for testing."""

from collections import Counter
from typing import Optional
from uuid import UUID

from portal.domain.model import LearningResource, ResourceDownload, ResourceRating
from portal.domain.repository import (
    LearningResourceRepository,
    ResourceDownloadRepository,
    ResourceRatingRepository,
)
from portal.domain.value import Difficulty, ResourceId, ResourceType

_COUNTERS = ("downloads", "rating", "rating_count")


class InMemoryLearningResourceRepository(LearningResourceRepository):
    """In-memory implementation of LearningResourceRepository for testing."""

    def __init__(self) -> None:
        self._resources: dict[ResourceId, LearningResource] = {}

    async def find_by_id(self, resource_id: ResourceId) -> Optional[LearningResource]:
        return self._resources.get(resource_id)

    async def find_all(
        self,
        category: Optional[str] = None,
        resource_type: Optional[ResourceType] = None,
        difficulty: Optional[Difficulty] = None,
        limit: Optional[int] = None,
    ) -> list[LearningResource]:
        resources = [
            r
            for r in self._resources.values()
            if (category is None or r.category == category)
            and (resource_type is None or r.type == resource_type)
            and (difficulty is None or r.difficulty == difficulty)
        ]
        resources.sort(key=lambda r: r.created_at, reverse=True)
        return resources[:limit] if limit is not None else resources

    async def save(self, resource: LearningResource) -> LearningResource:
        """Save a resource, keeping the stored counters of an existing one."""
        existing = self._resources.get(resource.id)
        counters = (
            {name: getattr(existing, name) for name in _COUNTERS}
            if existing
            else {name: 0 for name in _COUNTERS}
        )
        resource = resource.model_copy(update=counters)
        self._resources[resource.id] = resource
        return resource

    async def delete(self, resource_id: ResourceId) -> None:
        self._resources.pop(resource_id, None)

    async def count(self) -> int:
        return len(self._resources)

    async def increment_downloads(self, resource_id: ResourceId) -> int:
        resource = self._resources.get(resource_id)
        if not resource:
            return 0
        downloads = resource.downloads + 1
        self._resources[resource_id] = resource.model_copy(update={"downloads": downloads})
        return downloads

    async def set_rating(
        self, resource_id: ResourceId, rating: int, rating_count: int
    ) -> None:
        resource = self._resources.get(resource_id)
        if resource:
            self._resources[resource_id] = resource.model_copy(
                update={"rating": rating, "rating_count": rating_count}
            )

    async def set_downloads(self, resource_id: ResourceId, downloads: int) -> None:
        resource = self._resources.get(resource_id)
        if resource:
            self._resources[resource_id] = resource.model_copy(
                update={"downloads": downloads}
            )

    async def downloads_by_resource(self) -> dict[UUID, int]:
        return {r.id: r.downloads for r in self._resources.values()}

    async def sum_downloads(self) -> int:
        return sum(r.downloads for r in self._resources.values())


class InMemoryResourceDownloadRepository(ResourceDownloadRepository):
    """In-memory implementation of ResourceDownloadRepository for testing."""

    def __init__(self) -> None:
        self._downloads: list[ResourceDownload] = []

    async def add(self, download: ResourceDownload) -> None:
        self._downloads.append(download)

    async def count_by_resource(self) -> dict[UUID, int]:
        return dict(Counter(d.resource_id for d in self._downloads))

    async def count_by_user(self) -> dict[UUID, int]:
        return dict(Counter(d.user_id for d in self._downloads))

    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        self._downloads = [d for d in self._downloads if d.resource_id != resource_id]


class InMemoryResourceRatingRepository(ResourceRatingRepository):
    """In-memory implementation of ResourceRatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[tuple[UUID, UUID], ResourceRating] = {}

    async def upsert(self, rating: ResourceRating) -> None:
        key = (rating.user_id, rating.resource_id)
        existing = self._ratings.get(key)
        if existing:
            rating = existing.model_copy(
                update={"rating": rating.rating, "updated_at": rating.updated_at}
            )
        self._ratings[key] = rating

    async def summarize(self, resource_id: ResourceId) -> tuple[float, int]:
        stars = [r.rating for r in self._ratings.values() if r.resource_id == resource_id]
        if not stars:
            return 0.0, 0
        return sum(stars) / len(stars), len(stars)

    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        self._ratings = {
            key: rating
            for key, rating in self._ratings.items()
            if rating.resource_id != resource_id
        }
