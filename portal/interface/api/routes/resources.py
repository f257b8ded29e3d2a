"""Learning resource routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from portal.application.usecase.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    DownloadResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    RateResourceUseCase,
    UpdateResourceUseCase,
)
from portal.application.usecase.resource.create_resource import (
    CreateResourceRequest,
    CreateResourceResponse,
)
from portal.application.usecase.resource.delete_resource import (
    DeleteResourceRequest,
    DeleteResourceResponse,
)
from portal.application.usecase.resource.download_resource import (
    DownloadResourceRequest,
    DownloadResourceResponse,
)
from portal.application.usecase.resource.get_resource import (
    GetResourceRequest,
    GetResourceResponse,
)
from portal.application.usecase.resource.list_resources import (
    ListResourcesRequest,
    ListResourcesResponse,
)
from portal.application.usecase.resource.rate_resource import (
    RateResourceRequest,
    RateResourceResponse,
)
from portal.application.usecase.resource.update_resource import (
    UpdateResourceRequest,
    UpdateResourceResponse,
)
from portal.domain.value import Difficulty, ResourceType
from portal.interface.api.security import RequestSession

router = APIRouter(prefix="/resources", tags=["resources"], route_class=DishkaRoute)


class CreateResourceAPIRequest(BaseModel):
    """API request for publishing a learning resource."""

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


class RateResourceAPIRequest(BaseModel):
    rating: int


class UpdateResourceAPIRequest(BaseModel):
    """API request for editing a learning resource. Omitted fields are unchanged."""

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


@router.post(
    "", response_model=CreateResourceResponse, status_code=status.HTTP_201_CREATED
)
async def create_resource(
    request: CreateResourceAPIRequest,
    create_resource_use_case: FromDishka[CreateResourceUseCase],
    session: FromDishka[RequestSession],
) -> CreateResourceResponse:
    """Publish a learning resource (admin tier)."""
    actor = await session.principal()
    return await create_resource_use_case.execute(
        CreateResourceRequest(actor=actor, **request.model_dump())
    )


@router.get("", response_model=ListResourcesResponse)
async def list_resources(
    list_resources_use_case: FromDishka[ListResourcesUseCase],
    category: Optional[str] = None,
    type: Optional[ResourceType] = None,
    difficulty: Optional[Difficulty] = None,
) -> ListResourcesResponse:
    """Browse learning resources, optionally filtered."""
    return await list_resources_use_case.execute(
        ListResourcesRequest(category=category, type=type, difficulty=difficulty)
    )


@router.get("/{resource_id}", response_model=GetResourceResponse)
async def get_resource(
    resource_id: UUID,
    get_resource_use_case: FromDishka[GetResourceUseCase],
) -> GetResourceResponse:
    return await get_resource_use_case.execute(
        GetResourceRequest(resource_id=str(resource_id))
    )


@router.put("/{resource_id}", response_model=UpdateResourceResponse)
async def update_resource(
    resource_id: UUID,
    request: UpdateResourceAPIRequest,
    update_resource_use_case: FromDishka[UpdateResourceUseCase],
    session: FromDishka[RequestSession],
) -> UpdateResourceResponse:
    """Edit a learning resource (uploader or admin tier)."""
    actor = await session.principal()
    return await update_resource_use_case.execute(
        UpdateResourceRequest(
            actor=actor,
            resource_id=str(resource_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{resource_id}", response_model=DeleteResourceResponse)
async def delete_resource(
    resource_id: UUID,
    delete_resource_use_case: FromDishka[DeleteResourceUseCase],
    session: FromDishka[RequestSession],
) -> DeleteResourceResponse:
    """Delete a learning resource (uploader or admin tier)."""
    actor = await session.principal()
    return await delete_resource_use_case.execute(
        DeleteResourceRequest(actor=actor, resource_id=str(resource_id))
    )


@router.post("/{resource_id}/download", response_model=DownloadResourceResponse)
async def download_resource(
    resource_id: UUID,
    download_resource_use_case: FromDishka[DownloadResourceUseCase],
    session: FromDishka[RequestSession],
) -> DownloadResourceResponse:
    """Count a download of a resource. Every call counts."""
    actor = await session.principal()
    return await download_resource_use_case.execute(
        DownloadResourceRequest(actor=actor, resource_id=str(resource_id))
    )


@router.post("/{resource_id}/rate", response_model=RateResourceResponse)
async def rate_resource(
    resource_id: UUID,
    request: RateResourceAPIRequest,
    rate_resource_use_case: FromDishka[RateResourceUseCase],
    session: FromDishka[RequestSession],
) -> RateResourceResponse:
    """Rate a resource from 1 to 5. Rating again replaces the earlier rating.

    Example:
        POST /resources/{id}/rate
        {"rating": 4}
    """
    actor = await session.principal()
    return await rate_resource_use_case.execute(
        RateResourceRequest(
            actor=actor, resource_id=str(resource_id), rating=request.rating
        )
    )
