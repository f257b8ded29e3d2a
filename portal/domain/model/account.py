"""Account aggregate root.

Accounts are created by registration in the pending state and only become
usable for login once an administrator approves them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel, utcnow
from portal.domain.value import (
    ADMIN_TIER,
    ApprovalStatus,
    CampusLocation,
    Gender,
    Role,
    UserId,
)

# Fields counted towards profile completion
PROFILE_COMPLETION_FIELDS: tuple[str, ...] = (
    "email",
    "first_name",
    "last_name",
    "matric_number",
    "gender",
    "location",
    "address",
    "phone_number",
    "level",
)

# Fields the owner may change through the profile-update path
PROFILE_EDITABLE_FIELDS: frozenset[str] = frozenset(
    {
        "first_name",
        "last_name",
        "profile_image_url",
        "gender",
        "location",
        "address",
        "phone_number",
        "level",
        "occupation",
    }
)


def compute_profile_completion(values: dict[str, object]) -> int:
    """Percentage (0-100) of completion fields that are non-empty."""
    filled = sum(
        1
        for name in PROFILE_COMPLETION_FIELDS
        if values.get(name) not in (None, "")
    )
    return round(filled / len(PROFILE_COMPLETION_FIELDS) * 100)


class Account(DomainModel):
    """Account aggregate root.

    Business rules:
    - email unique across all accounts (database unique constraint)
    - matric_number unique when present
    - password_hash always set, never the plaintext
    - approval_status starts at pending
    """

    id: UserId
    email: str
    password_hash: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str] = None
    matric_number: Optional[str] = None
    gender: Optional[Gender] = None
    location: Optional[CampusLocation] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    level: Optional[str] = None
    occupation: Optional[str] = None
    role: Role = Role.STUDENT
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    profile_completion: int = Field(default=0, ge=0, le=100)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.APPROVED

    @property
    def is_elevated(self) -> bool:
        return self.role in ADMIN_TIER

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def with_changes(self, **changes: object) -> "Account":
        """Return a copy with changes applied and completion recomputed."""
        values = {**self.model_dump(), **changes, "updated_at": utcnow()}
        values["profile_completion"] = compute_profile_completion(values)
        return Account.model_validate(values)
