"""Unit tests for error-to-HTTP mapping."""

import pytest

from portal.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyError,
    DuplicateVoteError,
    EligibilityError,
    EventFullError,
    NotFoundError,
    PendingApprovalError,
    ValidationError,
)
from portal.interface.api.errors import status_code_for


@pytest.mark.parametrize(
    "error,expected",
    [
        (ValidationError("bad"), 400),
        (DuplicateVoteError("again"), 400),
        (EligibilityError("level"), 400),
        (ConflictError("email"), 409),
        (EventFullError("full"), 409),
        (AuthenticationError("who"), 401),
        (PendingApprovalError("wait"), 403),
        (AuthorizationError("no"), 403),
        (NotFoundError("Poll", "1"), 404),
        (DependencyError("db down"), 500),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_error_kinds_are_stable():
    assert ConflictError("email").kind == "conflict"
    assert PendingApprovalError("wait").kind == "pending_approval"
    assert DuplicateVoteError("again").kind == "duplicate_vote"
    assert EventFullError("full").kind == "event_full"
    assert ConflictError("matric_number").message == (
        "An account with this matric_number already exists"
    )
