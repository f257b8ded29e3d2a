"""Session transport for the HTTP interface.

A session token travels either as ``Authorization: Bearer <token>`` or in
the http-only session cookie. The header wins when both are present.
"""

from typing import Literal

from fastapi import Request, Response

from portal.config import AuthSettings
from portal.domain.model import Principal
from portal.domain.service import AccessService


class RequestSession:
    """Session token carried by the current request, resolved lazily."""

    def __init__(
        self,
        request: Request,
        auth_settings: AuthSettings,
        access_service: AccessService,
    ) -> None:
        """Initialize request session.

        Args:
            request: Incoming HTTP request
            auth_settings: Cookie name and security mode
            access_service: Token to principal resolution
        """
        self.request = request
        self.auth_settings = auth_settings
        self.access_service = access_service

    @property
    def token(self) -> str | None:
        authorization = self.request.headers.get("authorization")
        if authorization:
            scheme, _, credentials = authorization.partition(" ")
            if scheme.lower() == "bearer" and credentials.strip():
                return credentials.strip()
        return self.request.cookies.get(self.auth_settings.cookie_name) or None

    async def principal(self) -> Principal:
        """Resolve the caller.

        Raises:
            AuthenticationError: If there is no valid session
        """
        return await self.access_service.authenticate(self.token)

    async def optional_principal(self) -> Principal | None:
        """Resolve the caller, or None for anonymous requests."""
        return await self.access_service.authenticate_optional(self.token)

    @property
    def secure(self) -> bool:
        """Whether the session cookie gets the Secure attribute."""
        mode = self.auth_settings.cookie_secure
        if mode == "always":
            return True
        if mode == "never":
            return False
        forwarded = self.request.headers.get("x-forwarded-proto", "")
        return self.request.url.scheme == "https" or forwarded.lower() == "https"

    @property
    def samesite(self) -> Literal["strict", "lax"]:
        return "strict" if self.secure else "lax"

    def set_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.auth_settings.cookie_name,
            value=token,
            httponly=True,
            secure=self.secure,
            samesite=self.samesite,
            path="/",
            max_age=self.auth_settings.session_max_age,
        )

    def clear_cookie(self, response: Response) -> None:
        # Same attributes as set_cookie, or browsers keep the original
        response.delete_cookie(
            key=self.auth_settings.cookie_name,
            httponly=True,
            secure=self.secure,
            samesite=self.samesite,
            path="/",
        )
