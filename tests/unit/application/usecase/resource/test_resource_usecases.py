"""Unit tests for the learning resource use cases."""

import pytest

from portal.application.usecase.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    DownloadResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    RateResourceUseCase,
    UpdateResourceUseCase,
)
from portal.application.usecase.resource.create_resource import CreateResourceRequest
from portal.application.usecase.resource.delete_resource import DeleteResourceRequest
from portal.application.usecase.resource.download_resource import (
    DownloadResourceRequest,
)
from portal.application.usecase.resource.get_resource import GetResourceRequest
from portal.application.usecase.resource.list_resources import ListResourcesRequest
from portal.application.usecase.resource.rate_resource import RateResourceRequest
from portal.application.usecase.resource.update_resource import UpdateResourceRequest
from portal.domain.error import AuthorizationError, NotFoundError, ValidationError
from portal.domain.value import Difficulty, ResourceType, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


async def upload(env, actor, **kwargs):
    use_case = await env.get(CreateResourceUseCase)
    kwargs.setdefault("title", "Data Structures notes")
    kwargs.setdefault("type", ResourceType.PDF)
    kwargs.setdefault("file_url", "https://files.example.edu/ds.pdf")
    response = await use_case.execute(CreateResourceRequest(actor=actor, **kwargs))
    return response.resource


class TestCreateResource:
    @pytest.mark.asyncio
    async def test_admin_uploads(self, unit_env):
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))

        resource = await upload(unit_env, admin, difficulty=Difficulty.L200)

        assert resource.uploaded_by_id == str(admin.id)
        assert resource.difficulty == Difficulty.L200
        assert resource.downloads == 0

    @pytest.mark.asyncio
    async def test_students_cannot_upload(self, unit_env):
        student = principal_for(await seed_account(unit_env))

        with pytest.raises(AuthorizationError):
            await upload(unit_env, student)


class TestListAndGetResources:
    @pytest.mark.asyncio
    async def test_filters(self, unit_env):
        list_resources = await unit_env.get(ListResourcesUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        await upload(unit_env, admin, category="algorithms", difficulty=Difficulty.L100)
        await upload(
            unit_env, admin, title="Lecture 1", type=ResourceType.VIDEO, category="networks"
        )

        by_category = await list_resources.execute(
            ListResourcesRequest(category="algorithms")
        )
        by_type = await list_resources.execute(
            ListResourcesRequest(type=ResourceType.VIDEO)
        )
        everything = await list_resources.execute(ListResourcesRequest())

        assert [r.category for r in by_category.resources] == ["algorithms"]
        assert [r.title for r in by_type.resources] == ["Lecture 1"]
        assert len(everything.resources) == 2

    @pytest.mark.asyncio
    async def test_get_missing_resource(self, unit_env):
        get_resource = await unit_env.get(GetResourceUseCase)

        with pytest.raises(NotFoundError):
            await get_resource.execute(
                GetResourceRequest(resource_id="00000000-0000-0000-0000-000000000000")
            )


class TestUpdateAndDeleteResource:
    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        update = await unit_env.get(UpdateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        resource = await upload(unit_env, admin, category="algorithms")

        response = await update.execute(
            UpdateResourceRequest(actor=admin, resource_id=resource.id, title="Renamed")
        )

        assert response.resource.title == "Renamed"
        assert response.resource.category == "algorithms"

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        delete = await unit_env.get(DeleteResourceUseCase)
        get_resource = await unit_env.get(GetResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        resource = await upload(unit_env, admin)

        response = await delete.execute(
            DeleteResourceRequest(actor=admin, resource_id=resource.id)
        )

        assert response.success is True
        with pytest.raises(NotFoundError):
            await get_resource.execute(GetResourceRequest(resource_id=resource.id))


class TestDownloadResource:
    @pytest.mark.asyncio
    async def test_every_download_counts(self, unit_env):
        download = await unit_env.get(DownloadResourceUseCase)
        get_resource = await unit_env.get(GetResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        student = principal_for(await seed_account(unit_env))
        resource = await upload(unit_env, admin)

        await download.execute(
            DownloadResourceRequest(actor=student, resource_id=resource.id)
        )
        response = await download.execute(
            DownloadResourceRequest(actor=student, resource_id=resource.id)
        )

        assert response.downloads == 2
        fetched = await get_resource.execute(GetResourceRequest(resource_id=resource.id))
        assert fetched.resource.downloads == 2

    @pytest.mark.asyncio
    async def test_editing_keeps_the_download_count(self, unit_env):
        download = await unit_env.get(DownloadResourceUseCase)
        update = await unit_env.get(UpdateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        resource = await upload(unit_env, admin)
        await download.execute(DownloadResourceRequest(actor=admin, resource_id=resource.id))

        response = await update.execute(
            UpdateResourceRequest(actor=admin, resource_id=resource.id, title="Renamed")
        )

        assert response.resource.downloads == 1

    @pytest.mark.asyncio
    async def test_download_of_missing_resource(self, unit_env):
        download = await unit_env.get(DownloadResourceUseCase)
        student = principal_for(await seed_account(unit_env))

        with pytest.raises(NotFoundError):
            await download.execute(
                DownloadResourceRequest(
                    actor=student, resource_id="00000000-0000-0000-0000-000000000000"
                )
            )


class TestRateResource:
    @pytest.mark.asyncio
    async def test_average_over_users(self, unit_env):
        rate = await unit_env.get(RateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        first = principal_for(await seed_account(unit_env))
        second = principal_for(await seed_account(unit_env))
        resource = await upload(unit_env, admin)

        await rate.execute(RateResourceRequest(actor=first, resource_id=resource.id, rating=5))
        response = await rate.execute(
            RateResourceRequest(actor=second, resource_id=resource.id, rating=4)
        )

        assert response.your_rating == 4
        assert response.resource.average_rating == 4.5
        assert response.resource.rating_count == 2

    @pytest.mark.asyncio
    async def test_rating_again_replaces_earlier_rating(self, unit_env):
        rate = await unit_env.get(RateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        student = principal_for(await seed_account(unit_env))
        resource = await upload(unit_env, admin)

        await rate.execute(RateResourceRequest(actor=student, resource_id=resource.id, rating=2))
        response = await rate.execute(
            RateResourceRequest(actor=student, resource_id=resource.id, rating=5)
        )

        assert response.resource.average_rating == 5.0
        assert response.resource.rating_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stars", [0, 6])
    async def test_out_of_range_rating_is_rejected(self, unit_env, stars):
        rate = await unit_env.get(RateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        resource = await upload(unit_env, admin)

        with pytest.raises(ValidationError):
            await rate.execute(
                RateResourceRequest(actor=admin, resource_id=resource.id, rating=stars)
            )

    @pytest.mark.asyncio
    async def test_editing_keeps_the_rating(self, unit_env):
        rate = await unit_env.get(RateResourceUseCase)
        update = await unit_env.get(UpdateResourceUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        resource = await upload(unit_env, admin)
        await rate.execute(RateResourceRequest(actor=admin, resource_id=resource.id, rating=3))

        response = await update.execute(
            UpdateResourceRequest(actor=admin, resource_id=resource.id, category="maths")
        )

        assert response.resource.average_rating == 3.0
        assert response.resource.rating_count == 1
