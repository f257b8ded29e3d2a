"""Learning resource use cases."""

from .create_resource import CreateResourceUseCase
from .delete_resource import DeleteResourceUseCase
from .download_resource import DownloadResourceUseCase
from .get_resource import GetResourceUseCase
from .list_resources import ListResourcesUseCase
from .rate_resource import RateResourceUseCase
from .update_resource import UpdateResourceUseCase

__all__ = [
    "CreateResourceUseCase",
    "DeleteResourceUseCase",
    "DownloadResourceUseCase",
    "GetResourceUseCase",
    "ListResourcesUseCase",
    "RateResourceUseCase",
    "UpdateResourceUseCase",
]
