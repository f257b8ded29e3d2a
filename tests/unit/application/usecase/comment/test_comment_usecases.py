"""Unit tests for comment use cases."""

import pytest

from portal.application.usecase.comment import (
    CreateCommentUseCase,
    ListCommentsUseCase,
)
from portal.application.usecase.comment.create_comment import CreateCommentRequest
from portal.application.usecase.comment.list_comments import ListCommentsRequest
from portal.application.usecase.engagement import LikeUseCase
from portal.application.usecase.engagement.like import LikeRequest
from portal.domain.error import NotFoundError
from portal.domain.service import BlogService
from portal.domain.value import LikeTargetType, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_and_reply(self, unit_env):
        # Arrange
        blog = await unit_env.get(BlogService)
        use_case = await unit_env.get(CreateCommentUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        reader = principal_for(await seed_account(unit_env))
        post = await blog.create_post(admin, title="News", content="Body")

        # Act
        top = await use_case.execute(
            CreateCommentRequest(
                actor=reader, blog_post_id=str(post.id), content="First!"
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                actor=admin,
                blog_post_id=str(post.id),
                content="Welcome",
                parent_comment_id=top.comment.id,
            )
        )

        # Assert
        assert top.comment.parent_comment_id is None
        assert top.comment.author_id == str(reader.id)
        assert reply.comment.parent_comment_id == top.comment.id
        assert reply.comment.likes_count == 0

    @pytest.mark.asyncio
    async def test_cannot_comment_on_hidden_post(self, unit_env):
        """Test that unpublished posts are not visible to other members."""
        blog = await unit_env.get(BlogService)
        use_case = await unit_env.get(CreateCommentUseCase)
        author = principal_for(await seed_account(unit_env))
        stranger = principal_for(await seed_account(unit_env))
        draft = await blog.create_post(author, title="Draft", content="Body")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    actor=stranger, blog_post_id=str(draft.id), content="Hello"
                )
            )


class TestListCommentsUseCase:
    @pytest.mark.asyncio
    async def test_list_comments_reports_viewer_like_state(self, unit_env):
        # Arrange
        blog = await unit_env.get(BlogService)
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        like = await unit_env.get(LikeUseCase)
        admin = principal_for(await seed_account(unit_env, role=Role.ADMIN))
        reader = principal_for(await seed_account(unit_env))
        post = await blog.create_post(admin, title="News", content="Body")
        first = await create.execute(
            CreateCommentRequest(actor=reader, blog_post_id=str(post.id), content="A")
        )
        await create.execute(
            CreateCommentRequest(actor=reader, blog_post_id=str(post.id), content="B")
        )
        await like.execute(
            LikeRequest(
                actor=admin,
                target_type=LikeTargetType.COMMENT,
                target_id=first.comment.id,
            )
        )

        # Act
        as_admin = await list_comments.execute(
            ListCommentsRequest(blog_post_id=str(post.id), viewer=admin)
        )
        anonymous = await list_comments.execute(
            ListCommentsRequest(blog_post_id=str(post.id))
        )

        # Assert
        assert [c.content for c in as_admin.comments] == ["A", "B"]
        assert [c.is_liked_by_user for c in as_admin.comments] == [True, False]
        assert [c.likes_count for c in anonymous.comments] == [1, 0]
        assert not any(c.is_liked_by_user for c in anonymous.comments)
