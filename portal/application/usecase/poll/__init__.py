"""Poll use cases."""

from .close_poll import ClosePollUseCase
from .create_poll import CreatePollUseCase
from .get_poll import GetPollUseCase
from .list_polls import ListPollsUseCase
from .vote import VoteUseCase

__all__ = [
    "ClosePollUseCase",
    "CreatePollUseCase",
    "GetPollUseCase",
    "ListPollsUseCase",
    "VoteUseCase",
]
