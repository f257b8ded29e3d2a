"""Authenticated caller."""

from portal.domain.model.common import DomainModel
from portal.domain.value import ADMIN_TIER, Role, UserId


class Principal(DomainModel):
    """The caller a session token resolved to.

    The role is the account's current role at verification time, not the
    role embedded when the token was minted.
    """

    id: UserId
    email: str
    role: Role

    @property
    def is_elevated(self) -> bool:
        """Whether the caller is in the admin tier (admin or super_admin)."""
        return self.role in ADMIN_TIER

    def owns(self, owner_id: object) -> bool:
        return str(owner_id) == str(self.id)
