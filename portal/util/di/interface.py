"""Interface layer DI providers."""

from dishka import Scope, provide
from fastapi import Request

from portal.config import AuthSettings
from portal.domain.service import AccessService
from portal.interface.api.security import RequestSession
from portal.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """HTTP interface provider - concrete, no mocks needed.

    ``Request`` comes from the FastAPI integration's request context.
    """

    scope = Scope.REQUEST

    @provide
    def get_request_session(
        self,
        request: Request,
        auth_settings: AuthSettings,
        access_service: AccessService,
    ) -> RequestSession:
        """Provide the current request's session."""
        return RequestSession(
            request=request, auth_settings=auth_settings, access_service=access_service
        )
