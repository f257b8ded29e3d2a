"""PostgreSQL implementations of the learning resource repositories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import LearningResource, ResourceDownload, ResourceRating
from portal.domain.repository import (
    LearningResourceRepository,
    ResourceDownloadRepository,
    ResourceRatingRepository,
)
from portal.domain.value import Difficulty, ResourceId, ResourceType
from portal.persistence.mappers import (
    learning_resource_to_dict,
    resource_download_to_dict,
    resource_rating_to_dict,
    row_to_learning_resource,
)
from portal.persistence.tables import (
    learning_resources_table,
    resource_downloads_table,
    resource_ratings_table,
)


class PostgresLearningResourceRepository(LearningResourceRepository):
    """PostgreSQL implementation of LearningResourceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, resource_id: ResourceId) -> Optional[LearningResource]:
        stmt = select(learning_resources_table).where(
            learning_resources_table.c.id == resource_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_learning_resource(dict(row)) if row else None

    async def find_all(
        self,
        category: Optional[str] = None,
        resource_type: Optional[ResourceType] = None,
        difficulty: Optional[Difficulty] = None,
        limit: Optional[int] = None,
    ) -> list[LearningResource]:
        stmt = select(learning_resources_table)
        if category:
            stmt = stmt.where(learning_resources_table.c.category == category)
        if resource_type:
            stmt = stmt.where(learning_resources_table.c.type == resource_type.value)
        if difficulty:
            stmt = stmt.where(learning_resources_table.c.difficulty == difficulty.value)
        stmt = stmt.order_by(learning_resources_table.c.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_learning_resource(dict(row)) for row in result.mappings().all()]

    async def save(self, resource: LearningResource) -> LearningResource:
        """Save resource metadata.

        Returns:
            The stored resource, with counters as currently persisted
        """
        existing = await self.find_by_id(resource.id)
        resource_dict = learning_resource_to_dict(resource)

        if existing:
            stmt = (
                learning_resources_table.update()
                .where(learning_resources_table.c.id == resource.id)
                .values(**resource_dict)
            )
        else:
            stmt = learning_resources_table.insert().values(**resource_dict)
        await self.session.execute(stmt)
        await self.session.flush()

        saved = await self.find_by_id(resource.id)
        return saved or resource

    async def delete(self, resource_id: ResourceId) -> None:
        stmt = delete(learning_resources_table).where(
            learning_resources_table.c.id == resource_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(learning_resources_table)
        )
        return result.scalar_one()

    async def increment_downloads(self, resource_id: ResourceId) -> int:
        """Atomically increment the download counter and return the new value."""
        stmt = (
            learning_resources_table.update()
            .where(learning_resources_table.c.id == resource_id)
            .values(downloads=learning_resources_table.c.downloads + 1)
            .returning(learning_resources_table.c.downloads)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        value = result.scalar_one_or_none()
        return value if value is not None else 0

    async def set_rating(
        self, resource_id: ResourceId, rating: int, rating_count: int
    ) -> None:
        stmt = (
            learning_resources_table.update()
            .where(learning_resources_table.c.id == resource_id)
            .values(rating=rating, rating_count=rating_count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_downloads(self, resource_id: ResourceId, downloads: int) -> None:
        stmt = (
            learning_resources_table.update()
            .where(learning_resources_table.c.id == resource_id)
            .values(downloads=downloads)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def downloads_by_resource(self) -> dict[UUID, int]:
        stmt = select(learning_resources_table.c.id, learning_resources_table.c.downloads)
        result = await self.session.execute(stmt)
        return {resource_id: downloads for resource_id, downloads in result.all()}

    async def sum_downloads(self) -> int:
        result = await self.session.execute(
            select(func.coalesce(func.sum(learning_resources_table.c.downloads), 0))
        )
        return int(result.scalar_one())


class PostgresResourceDownloadRepository(ResourceDownloadRepository):
    """PostgreSQL implementation of ResourceDownloadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, download: ResourceDownload) -> None:
        stmt = resource_downloads_table.insert().values(
            **resource_download_to_dict(download)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_resource(self) -> dict[UUID, int]:
        stmt = select(resource_downloads_table.c.resource_id, func.count()).group_by(
            resource_downloads_table.c.resource_id
        )
        result = await self.session.execute(stmt)
        return {resource_id: count for resource_id, count in result.all()}

    async def count_by_user(self) -> dict[UUID, int]:
        stmt = select(resource_downloads_table.c.user_id, func.count()).group_by(
            resource_downloads_table.c.user_id
        )
        result = await self.session.execute(stmt)
        return {user_id: count for user_id, count in result.all()}

    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        stmt = delete(resource_downloads_table).where(
            resource_downloads_table.c.resource_id == resource_id
        )
        await self.session.execute(stmt)
        await self.session.flush()


class PostgresResourceRatingRepository(ResourceRatingRepository):
    """PostgreSQL implementation of ResourceRatingRepository.

    ``upsert`` relies on the (user_id, resource_id) unique constraint, so a
    second rating by the same user replaces the first.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def upsert(self, rating: ResourceRating) -> None:
        stmt = insert(resource_ratings_table).values(**resource_rating_to_dict(rating))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_user_resource_rating",
            set_={
                "rating": stmt.excluded.rating,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def summarize(self, resource_id: ResourceId) -> tuple[float, int]:
        stmt = select(
            func.coalesce(func.avg(resource_ratings_table.c.rating), 0),
            func.count(resource_ratings_table.c.id),
        ).where(resource_ratings_table.c.resource_id == resource_id)
        result = await self.session.execute(stmt)
        average, count = result.one()
        return float(average), int(count)

    async def delete_by_resource(self, resource_id: ResourceId) -> None:
        stmt = delete(resource_ratings_table).where(
            resource_ratings_table.c.resource_id == resource_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
