"""Engagement use cases."""

from .like import LikeUseCase
from .unlike import UnlikeUseCase

__all__ = ["LikeUseCase", "UnlikeUseCase"]
