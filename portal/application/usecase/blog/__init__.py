"""Blog post use cases."""

from .create_blog import CreateBlogUseCase
from .delete_blog import DeleteBlogUseCase
from .get_blog import GetBlogUseCase
from .list_blogs import ListBlogsUseCase
from .moderate_blog import ModerateBlogUseCase
from .update_blog import UpdateBlogUseCase

__all__ = [
    "CreateBlogUseCase",
    "DeleteBlogUseCase",
    "GetBlogUseCase",
    "ListBlogsUseCase",
    "ModerateBlogUseCase",
    "UpdateBlogUseCase",
]
