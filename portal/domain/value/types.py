"""Domain value objects for the department portal.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalisation.
"""

import re
from enum import Enum

from pydantic import field_validator

from portal.domain.value.common import RootValueObject


class Role(str, Enum):
    """Account role.

    The set is fixed; admin and super_admin form the elevated tier.
    """

    STUDENT = "student"
    ALUMNUS = "alumnus"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


ADMIN_TIER: frozenset[Role] = frozenset({Role.ADMIN, Role.SUPER_ADMIN})


class ApprovalStatus(str, Enum):
    """Approval state of an account. Only approved accounts may log in."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class CampusLocation(str, Enum):
    ON_CAMPUS = "on_campus"
    OFF_CAMPUS = "off_campus"


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    BLOG_POST = "blog_post"
    COMMENT = "comment"


class PollStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class ResourceType(str, Enum):
    PDF = "pdf"
    VIDEO = "video"
    IMAGE = "image"
    DOCUMENT = "document"


class Difficulty(str, Enum):
    """Academic level a learning resource targets."""

    L100 = "100l"
    L200 = "200l"
    L300 = "300l"
    L400 = "400l"


class EventType(str, Enum):
    WORKSHOP = "workshop"
    SEMINAR = "seminar"
    CONFERENCE = "conference"
    SOCIAL = "social"
    ACADEMIC = "academic"


class RegistrationStatus(str, Enum):
    """Attendance state of an event registration."""

    REGISTERED = "registered"
    ATTENDED = "attended"
    CANCELLED = "cancelled"


class TokenPurpose(str, Enum):
    """What a signed token may be redeemed for."""

    SESSION = "session"
    PASSWORD_RESET = "password_reset"


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Email(RootValueObject[str]):
    """Email address, trimmed and lower-cased.

    Examples: 'alice@x.edu', ' Alice@X.EDU ' -> 'alice@x.edu'
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalise and validate email format."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class MatricNumber(RootValueObject[str]):
    """Student identifier, trimmed and upper-cased for uniqueness.

    Examples: 'soc/21/001' -> 'SOC/21/001'
    """

    @field_validator("root")
    @classmethod
    def normalize_matric_number(cls, v: str) -> str:
        """Normalise matric number."""
        v = v.strip().upper()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Matric number must be 1-50 characters")
        return v

    def contains_marker(self, marker: str) -> bool:
        """Check the department-eligibility marker, case-insensitively."""
        return marker.lower() in self.root.lower()


def normalize_level(level: str | None) -> str | None:
    """Normalise an academic level for comparison.

    '300L', ' 300l ', and '300' all normalise to '300'.
    """
    if level is None:
        return None
    value = level.strip().lower()
    if value.endswith("l"):
        value = value[:-1].strip()
    return value or None
