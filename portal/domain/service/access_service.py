"""Access control domain service."""

from typing import Collection
from uuid import UUID

import logfire

from portal.domain.error import AuthenticationError, AuthorizationError
from portal.domain.model import Principal
from portal.domain.repository import AccountRepository
from portal.domain.value import ADMIN_TIER, Role, UserId
from portal.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService

AUTHENTICATION_REQUIRED = "Authentication required"
INVALID_SESSION = "Invalid or expired session"


class AccessService(Service):
    """Resolves session tokens to principals and enforces role and
    ownership gates.

    A token only resolves while its account still exists and is approved;
    the principal carries the account's current role.
    """

    def __init__(
        self, jwt_service: JWTService, account_repository: AccountRepository
    ) -> None:
        """Initialize access service.

        Args:
            jwt_service: JWT service for token verification
            account_repository: Account repository
        """
        self.jwt_service = jwt_service
        self.account_repository = account_repository

    async def authenticate(self, token: str | None) -> Principal:
        """Resolve a session token to the calling principal.

        Args:
            token: Session token from cookie or bearer header

        Returns:
            Principal for the token's account

        Raises:
            AuthenticationError: If the token is missing, invalid, expired,
                or its account no longer exists or is not approved
        """
        if not token:
            raise AuthenticationError(AUTHENTICATION_REQUIRED)

        with logfire.span("access_service.authenticate"):
            try:
                payload = self.jwt_service.verify_session_token(token)
                account_id = UserId(UUID(payload.sub))
            except (JWTError, ValueError) as e:
                logfire.info("Session rejected", reason=str(e))
                raise AuthenticationError(INVALID_SESSION)

            account = await self.account_repository.find_by_id(account_id)
            if not account or not account.is_approved:
                logfire.info("Session rejected", reason="account unavailable")
                raise AuthenticationError(INVALID_SESSION)

            return Principal(id=account.id, email=account.email, role=account.role)

    async def authenticate_optional(self, token: str | None) -> Principal | None:
        """Resolve a session token, treating any failure as anonymous."""
        if not token:
            return None
        try:
            return await self.authenticate(token)
        except AuthenticationError:
            return None

    @staticmethod
    def require_roles(principal: Principal, roles: Collection[Role]) -> None:
        """Role gate.

        Raises:
            AuthorizationError: If the principal's role is not in ``roles``
        """
        if principal.role not in roles:
            logfire.warn(
                "Role check failed",
                user_id=str(principal.id),
                role=principal.role.value,
                allowed=[role.value for role in roles],
            )
            raise AuthorizationError("You do not have permission to perform this action")

    @classmethod
    def require_admin(cls, principal: Principal) -> None:
        cls.require_roles(principal, ADMIN_TIER)

    @classmethod
    def require_super_admin(cls, principal: Principal) -> None:
        cls.require_roles(principal, {Role.SUPER_ADMIN})

    @staticmethod
    def ensure_owner_or_elevated(
        principal: Principal, owner_id: UUID, resource: str, resource_id: UUID
    ) -> None:
        """Ownership gate for mutations of user-owned entities.

        Raises:
            AuthorizationError: Unless the principal owns the resource or
                is in the admin tier
        """
        if principal.owns(owner_id) or principal.is_elevated:
            return
        logfire.warn(
            "Ownership check failed",
            user_id=str(principal.id),
            resource=resource,
            resource_id=str(resource_id),
        )
        raise AuthorizationError(f"You are not allowed to modify this {resource}")
