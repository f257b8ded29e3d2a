"""Domain layer errors.

Every error carries a stable ``kind`` that the interface layer exposes to
clients next to the human-readable message.
"""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[str] = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input."""

    kind = "validation_error"


class ConflictError(DomainError):
    """A uniqueness rule was violated."""

    kind = "conflict"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"An account with this {field} already exists")


class AuthenticationError(DomainError):
    """Bad credentials, or a missing or invalid session."""

    kind = "authentication_error"


class PendingApprovalError(DomainError):
    """Credentials are valid but the account is not approved."""

    kind = "pending_approval"


class AuthorizationError(DomainError):
    """Valid session, insufficient role or ownership."""

    kind = "authorization_error"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PollError(DomainError):
    """Base for vote rejections."""


class EligibilityError(PollError):
    kind = "eligibility_error"


class PollClosedError(PollError):
    kind = "poll_closed"


class InvalidOptionError(PollError):
    kind = "invalid_option"


class DuplicateVoteError(PollError):
    kind = "duplicate_vote"


class EventFullError(DomainError):
    """An event has no places left."""

    kind = "event_full"


class DependencyError(DomainError):
    """Storage or external-service failure."""

    kind = "dependency_error"
