"""Unit tests for AccessService and JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from portal.config import AuthSettings
from portal.domain.error import AuthenticationError, AuthorizationError
from portal.domain.model import Principal
from portal.domain.repository import AccountRepository
from portal.domain.service import AccessService, JWTService, PasswordService
from portal.domain.value import ApprovalStatus, Role, TokenPurpose, UserId
from portal.util.jwt import JWTError, create_token
from tests.harness import create_env_fixture, seed_account

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthenticate:
    """Tests for resolving session tokens."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_to_principal(self, unit_env):
        access = await unit_env.get(AccessService)
        jwt_service = await unit_env.get(JWTService)
        account = await seed_account(unit_env)

        principal = await access.authenticate(jwt_service.create_session_token(account))

        assert principal.id == account.id
        assert principal.role == Role.STUDENT

    @pytest.mark.asyncio
    async def test_principal_carries_current_role(self, unit_env):
        """A role change applies to tokens minted before it."""
        access = await unit_env.get(AccessService)
        jwt_service = await unit_env.get(JWTService)
        repo = await unit_env.get(AccountRepository)
        account = await seed_account(unit_env)
        token = jwt_service.create_session_token(account)

        await repo.save(account.with_changes(role=Role.ADMIN))

        principal = await access.authenticate(token)
        assert principal.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        access = await unit_env.get(AccessService)

        with pytest.raises(AuthenticationError, match="Authentication required"):
            await access.authenticate(None)

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        access = await unit_env.get(AccessService)

        with pytest.raises(AuthenticationError, match="Invalid or expired session"):
            await access.authenticate("not.a.jwt")

    @pytest.mark.asyncio
    async def test_reset_token_is_not_a_session(self, unit_env):
        access = await unit_env.get(AccessService)
        jwt_service = await unit_env.get(JWTService)
        passwords = await unit_env.get(PasswordService)
        account = await seed_account(unit_env)

        reset_token = jwt_service.create_reset_token(
            account, passwords.fingerprint(account.password_hash)
        )

        with pytest.raises(AuthenticationError):
            await access.authenticate(reset_token)

    @pytest.mark.asyncio
    async def test_token_for_unapproved_account_is_rejected(self, unit_env):
        access = await unit_env.get(AccessService)
        jwt_service = await unit_env.get(JWTService)
        repo = await unit_env.get(AccountRepository)
        account = await seed_account(unit_env)
        token = jwt_service.create_session_token(account)

        await repo.save(account.with_changes(approval_status=ApprovalStatus.REJECTED))

        with pytest.raises(AuthenticationError):
            await access.authenticate(token)
        assert await access.authenticate_optional(token) is None

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        access = await unit_env.get(AccessService)
        settings = await unit_env.get(AuthSettings)
        account = await seed_account(unit_env)

        token = create_token(
            {"sub": str(account.id), "email": account.email},
            purpose=TokenPurpose.SESSION.value,
            expires_in=timedelta(seconds=-1),
            settings=settings,
        )

        with pytest.raises(AuthenticationError):
            await access.authenticate(token)


class TestJWTService:
    @pytest.mark.asyncio
    async def test_session_token_round_trip(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        account = await seed_account(unit_env, role=Role.ADMIN)

        payload = jwt_service.verify_session_token(
            jwt_service.create_session_token(account)
        )

        assert payload.sub == str(account.id)
        assert payload.role == "admin"
        assert payload.purpose == TokenPurpose.SESSION.value

    @pytest.mark.asyncio
    async def test_session_token_is_not_a_reset_token(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        account = await seed_account(unit_env)

        with pytest.raises(JWTError, match="purpose"):
            jwt_service.verify_reset_token(jwt_service.create_session_token(account))

    def test_token_signed_with_other_secret_is_rejected(self):
        ours = JWTService(AuthSettings(jwt_secret="a" * 32))
        theirs = JWTService(AuthSettings(jwt_secret="b" * 32))
        token = create_token(
            {"sub": str(uuid4()), "email": "x@example.com"},
            purpose=TokenPurpose.SESSION.value,
            expires_in=timedelta(minutes=5),
            settings=theirs.auth_settings,
        )

        with pytest.raises(JWTError, match="Invalid token"):
            ours.verify_session_token(token)


class TestGates:
    """Tests for the role and ownership gates."""

    def principal(self, role: Role) -> Principal:
        return Principal(id=UserId(uuid4()), email="p@example.com", role=role)

    def test_require_admin_accepts_admin_tier(self):
        AccessService.require_admin(self.principal(Role.ADMIN))
        AccessService.require_admin(self.principal(Role.SUPER_ADMIN))

    @pytest.mark.parametrize("role", [Role.STUDENT, Role.ALUMNUS])
    def test_require_admin_rejects_members(self, role):
        with pytest.raises(AuthorizationError):
            AccessService.require_admin(self.principal(role))

    def test_require_super_admin_rejects_admin(self):
        with pytest.raises(AuthorizationError):
            AccessService.require_super_admin(self.principal(Role.ADMIN))

    def test_owner_may_modify(self):
        owner = self.principal(Role.STUDENT)
        AccessService.ensure_owner_or_elevated(owner, owner.id, "comment", uuid4())

    def test_stranger_may_not_modify(self):
        stranger = self.principal(Role.ALUMNUS)

        with pytest.raises(AuthorizationError, match="comment"):
            AccessService.ensure_owner_or_elevated(stranger, uuid4(), "comment", uuid4())

    def test_elevated_may_modify_anything(self):
        admin = self.principal(Role.ADMIN)
        AccessService.ensure_owner_or_elevated(admin, uuid4(), "blog post", uuid4())
