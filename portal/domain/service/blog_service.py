"""Blog post domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from portal.domain.error import NotFoundError
from portal.domain.model import BlogPost, Principal
from portal.domain.model.common import utcnow
from portal.domain.repository import (
    BlogPostRepository,
    CommentRepository,
    LikeRepository,
    ViewRepository,
)
from portal.domain.value import BlogPostId, LikeTargetType

from .access_service import AccessService
from .base import Service

# Content fields an owner may edit
EDITABLE_FIELDS = frozenset(
    {"title", "excerpt", "content", "category", "tags", "read_time", "image_url", "image_urls"}
)


class BlogService(Service):
    """Domain service for blog posts and their moderation."""

    def __init__(
        self,
        blog_post_repository: BlogPostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        view_repository: ViewRepository,
    ) -> None:
        self.blog_post_repository = blog_post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.view_repository = view_repository

    async def create_post(self, author: Principal, **fields: object) -> BlogPost:
        """Create a blog post.

        Posts by the admin tier are published immediately; others wait for
        moderation.

        Args:
            author: Authoring principal
            **fields: Content fields (title, content, excerpt, ...)

        Returns:
            Created post
        """
        with logfire.span("blog_service.create_post", author_id=str(author.id)):
            content = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
            post = BlogPost(
                id=BlogPostId(uuid4()),
                author_id=author.id,
                published=author.is_elevated,
                **content,
            )
            saved = await self.blog_post_repository.save(post)
            logfire.info(
                "Blog post created", blog_post_id=str(saved.id), published=saved.published
            )
            return saved

    async def get_post(self, post_id: BlogPostId) -> BlogPost:
        post = await self.blog_post_repository.find_by_id(post_id)
        if not post:
            raise NotFoundError("Blog post", str(post_id))
        return post

    async def get_visible_post(
        self, post_id: BlogPostId, viewer: Optional[Principal]
    ) -> BlogPost:
        """Get a post the viewer is allowed to see.

        Unpublished posts are visible to their author and the admin tier
        only; everyone else gets a not-found.
        """
        post = await self.get_post(post_id)
        if not post.published and not self._can_see_unpublished(post, viewer):
            raise NotFoundError("Blog post", str(post_id))
        return post

    async def list_posts(
        self,
        viewer: Optional[Principal],
        include_unpublished: bool = False,
        category: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[BlogPost]:
        """List posts, newest first.

        ``include_unpublished`` only takes effect for the admin tier.
        """
        include = include_unpublished and viewer is not None and viewer.is_elevated
        return await self.blog_post_repository.find_all(
            include_unpublished=include, category=category, limit=limit, offset=offset
        )

    async def update_post(
        self, post_id: BlogPostId, actor: Principal, changes: dict[str, object]
    ) -> BlogPost:
        """Edit a post's content (owner or admin tier).

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the actor neither owns the post nor is elevated
        """
        with logfire.span("blog_service.update_post", blog_post_id=str(post_id)):
            post = await self.get_post(post_id)
            AccessService.ensure_owner_or_elevated(actor, post.author_id, "blog post", post.id)

            allowed = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
            updated = BlogPost.model_validate(
                {**post.model_dump(), **allowed, "updated_at": utcnow()}
            )
            return await self.blog_post_repository.save(updated)

    async def moderate_post(
        self,
        post_id: BlogPostId,
        actor: Principal,
        published: bool,
        featured: Optional[bool] = None,
    ) -> BlogPost:
        """Publish, unpublish or feature a post (admin tier)."""
        with logfire.span("blog_service.moderate_post", blog_post_id=str(post_id)):
            AccessService.require_admin(actor)
            post = await self.get_post(post_id)

            update: dict[str, object] = {"published": published, "updated_at": utcnow()}
            if featured is not None:
                update["featured"] = featured
            moderated = await self.blog_post_repository.save(post.model_copy(update=update))
            logfire.info(
                "Blog post moderated",
                blog_post_id=str(post_id),
                published=published,
                featured=moderated.featured,
            )
            return moderated

    async def delete_post(self, post_id: BlogPostId, actor: Principal) -> None:
        """Delete a post with its comments, likes and views (owner or admin tier)."""
        with logfire.span("blog_service.delete_post", blog_post_id=str(post_id)):
            post = await self.get_post(post_id)
            AccessService.ensure_owner_or_elevated(actor, post.author_id, "blog post", post.id)

            comments = await self.comment_repository.find_by_blog_post(post_id)
            comment_ids = [comment.id for comment in comments]
            if comment_ids:
                await self.like_repository.delete_by_targets(
                    LikeTargetType.COMMENT, comment_ids
                )
                await self.comment_repository.delete(comment_ids)

            await self.like_repository.delete_by_targets(LikeTargetType.BLOG_POST, [post_id])
            await self.view_repository.delete_by_blog_post(post_id)
            await self.blog_post_repository.delete(post_id)
            logfire.info("Blog post deleted", blog_post_id=str(post_id))

    @staticmethod
    def _can_see_unpublished(post: BlogPost, viewer: Optional[Principal]) -> bool:
        return viewer is not None and (viewer.owns(post.author_id) or viewer.is_elevated)
