"""Unit tests for UpdateProfileUseCase."""

import pytest

from portal.application.usecase.user import UpdateProfileUseCase
from portal.application.usecase.user.update_profile import UpdateProfileRequest
from portal.domain.error import ValidationError
from portal.domain.repository import AccountRepository
from portal.domain.value import ApprovalStatus, Role
from tests.harness import create_env_fixture, principal_for, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_profile_success(self, unit_env):
        """Test successfully updating editable fields."""
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await seed_account(unit_env)

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(
                actor=principal_for(account),
                changes={"occupation": "Geologist", "phone_number": "+2348000000000"},
            )
        )

        # Assert
        assert response.user.occupation == "Geologist"
        assert response.user.phone_number == "+2348000000000"
        assert response.user.profile_completion > account.profile_completion
        assert response.message == "Profile updated successfully"

    @pytest.mark.asyncio
    async def test_update_profile_ignores_privileged_fields(self, unit_env):
        """Test that role, approval state and email cannot be self-assigned."""
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        accounts = await unit_env.get(AccountRepository)
        account = await seed_account(unit_env)

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(
                actor=principal_for(account),
                changes={
                    "role": "super_admin",
                    "approval_status": "approved",
                    "email": "someone-else@example.com",
                    "address": "Hall 3",
                },
            )
        )

        # Assert
        stored = await accounts.find_by_id(account.id)
        assert stored.role == Role.STUDENT
        assert stored.approval_status == ApprovalStatus.APPROVED
        assert stored.email == account.email
        assert stored.address == "Hall 3"
        assert response.user.role == Role.STUDENT

    @pytest.mark.asyncio
    async def test_update_profile_with_no_editable_fields_is_noop(self, unit_env):
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await seed_account(unit_env)

        response = await use_case.execute(
            UpdateProfileRequest(actor=principal_for(account), changes={"role": "admin"})
        )

        assert response.user.updated_at == account.updated_at

    @pytest.mark.asyncio
    async def test_update_profile_rejects_blank_name(self, unit_env):
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await seed_account(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateProfileRequest(
                    actor=principal_for(account), changes={"first_name": "   "}
                )
            )
