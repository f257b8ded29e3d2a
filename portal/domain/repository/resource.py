"""Learning resource repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal.domain.model.resource import (
    LearningResource,
    ResourceDownload,
    ResourceRating,
)
from portal.domain.value import Difficulty, ResourceId, ResourceType


class LearningResourceRepository(ABC):
    """Repository for LearningResource entity.

    ``save`` writes metadata only; the download and rating columns are
    changed through the dedicated counter methods.
    """

    @abstractmethod
    async def find_by_id(self, resource_id: ResourceId) -> Optional[LearningResource]:
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        resource_type: Optional[ResourceType] = None,
        difficulty: Optional[Difficulty] = None,
        limit: Optional[int] = None,
    ) -> list[LearningResource]:
        """Find resources, newest first, with optional filters."""
        pass

    @abstractmethod
    async def save(self, resource: LearningResource) -> LearningResource:
        pass

    @abstractmethod
    async def delete(self, resource_id: ResourceId) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def increment_downloads(self, resource_id: ResourceId) -> int:
        """Atomically add one download and return the new count."""
        pass

    @abstractmethod
    async def set_rating(
        self, resource_id: ResourceId, rating: int, rating_count: int
    ) -> None:
        """Store the recomputed rating (average x 10) and number of ratings."""
        pass

    @abstractmethod
    async def set_downloads(self, resource_id: ResourceId, downloads: int) -> None:
        """Overwrite the download counter (reconciliation only)."""
        pass

    @abstractmethod
    async def downloads_by_resource(self) -> dict[UUID, int]:
        """Stored download counter of every resource."""
        pass

    @abstractmethod
    async def sum_downloads(self) -> int:
        pass


class ResourceDownloadRepository(ABC):
    """Append-only ledger of resource downloads."""

    @abstractmethod
    async def add(self, download: ResourceDownload) -> None:
        pass

    @abstractmethod
    async def count_by_resource(self) -> dict[UUID, int]:
        """Count downloads per resource (used for reconciliation)."""
        pass

    @abstractmethod
    async def count_by_user(self) -> dict[UUID, int]:
        """Count downloads per user."""
        pass

    @abstractmethod
    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        pass


class ResourceRatingRepository(ABC):
    """Ratings, unique per (user, resource)."""

    @abstractmethod
    async def upsert(self, rating: ResourceRating) -> None:
        """Insert a rating, or replace the user's earlier rating of the resource."""
        pass

    @abstractmethod
    async def summarize(self, resource_id: ResourceId) -> tuple[float, int]:
        """Average rating and number of ratings of a resource.

        Returns:
            (average, count); the average is 0.0 when there are no ratings
        """
        pass

    @abstractmethod
    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        pass
