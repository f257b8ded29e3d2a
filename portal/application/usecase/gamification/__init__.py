"""Gamification use cases."""

from .badges import BadgesUseCase
from .leaderboard import LeaderboardUseCase
from .user_progress import UserProgressUseCase

__all__ = ["BadgesUseCase", "LeaderboardUseCase", "UserProgressUseCase"]
