"""Account domain service.

Owns the account lifecycle: registration, credential checks, the
approval state machine, role changes, profile updates and password
resets.
"""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from portal.config import RegistrationSettings
from portal.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PendingApprovalError,
    ValidationError,
)
from portal.domain.model import Account, Principal
from portal.domain.model.account import (
    PROFILE_EDITABLE_FIELDS,
    compute_profile_completion,
)
from portal.domain.repository import AccountRepository
from portal.domain.value import (
    ApprovalStatus,
    CampusLocation,
    Email,
    Gender,
    MatricNumber,
    Role,
    UserId,
)
from portal.domain.value.common import ValueObject

from .access_service import AccessService
from .base import Service
from .password_service import PasswordService

INVALID_CREDENTIALS = "Invalid email or password"


class NewAccountDetails(ValueObject):
    """Raw registration input, before validation."""

    email: str
    password: str = Field(repr=False)
    first_name: str
    last_name: str
    matric_number: Optional[str] = None
    gender: Optional[Gender] = None
    location: Optional[CampusLocation] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    level: Optional[str] = None
    occupation: Optional[str] = None
    profile_image_url: Optional[str] = None


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_service: PasswordService,
        registration_settings: RegistrationSettings,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            password_service: Password hashing service
            registration_settings: Registration rules (marker, password length)
        """
        self.account_repository = account_repository
        self.password_service = password_service
        self.registration_settings = registration_settings

    async def register(self, details: NewAccountDetails) -> Account:
        """Register a new account in the pending state.

        Validation runs before storage is touched. Role and approval state
        are never taken from input.

        Args:
            details: Registration input

        Returns:
            Created account

        Raises:
            ValidationError: If any input rule fails
            ConflictError: If email or matric number is already registered
        """
        with logfire.span("account_service.register"):
            email = self._validate_email(details.email)
            self.validate_password(details.password)
            first_name = self._require_text(details.first_name, "First name")
            last_name = self._require_text(details.last_name, "Last name")
            matric_number = self._validate_matric_number(details.matric_number)

            if await self.account_repository.find_by_email(email):
                logfire.info("Registration conflict", field="email")
                raise ConflictError("email")
            if matric_number and await self.account_repository.find_by_matric_number(
                matric_number
            ):
                logfire.info("Registration conflict", field="matric_number")
                raise ConflictError("matric_number")

            password_hash = await self.password_service.hash(details.password)

            values = {
                **details.model_dump(exclude={"password"}),
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "matric_number": matric_number,
            }
            account = Account(
                id=UserId(uuid4()),
                password_hash=password_hash,
                role=Role.STUDENT,
                approval_status=ApprovalStatus.PENDING,
                profile_completion=compute_profile_completion(values),
                **values,
            )

            try:
                saved = await self.account_repository.save(account)
            except IntegrityError as e:
                # Lost a race with a concurrent registration
                field = "matric_number" if "matric" in str(e).lower() else "email"
                logfire.warn("Registration conflict on insert", field=field)
                raise ConflictError(field)

            logfire.info("Account registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> Account:
        """Check login credentials.

        Unknown email and wrong password fail with the same message.

        Args:
            email: Email as typed by the user
            password: Plaintext password

        Returns:
            The approved account

        Raises:
            AuthenticationError: If credentials do not match
            PendingApprovalError: If credentials match but the account is
                not approved
        """
        with logfire.span("account_service.authenticate"):
            try:
                normalized = Email(email).root
            except ValueError:
                normalized = None

            account = (
                await self.account_repository.find_by_email(normalized)
                if normalized
                else None
            )
            matches = await self.password_service.verify(
                password, account.password_hash if account else None
            )
            if not account or not matches:
                logfire.info("Login rejected", reason="invalid_credentials")
                raise AuthenticationError(INVALID_CREDENTIALS)

            if account.approval_status == ApprovalStatus.PENDING:
                logfire.info("Login rejected", reason="pending", user_id=str(account.id))
                raise PendingApprovalError(
                    "Your account is pending approval by an administrator"
                )
            if account.approval_status == ApprovalStatus.REJECTED:
                logfire.info("Login rejected", reason="rejected", user_id=str(account.id))
                raise PendingApprovalError(
                    "Your account registration was not approved"
                )

            logfire.info("Login succeeded", user_id=str(account.id))
            return account

    async def get_account(self, account_id: UserId) -> Account:
        """Get an account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.account_repository.find_by_id(account_id)
        if not account:
            raise NotFoundError("Account", str(account_id))
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        try:
            normalized = Email(email).root
        except ValueError:
            return None
        return await self.account_repository.find_by_email(normalized)

    async def list_by_status(
        self, actor: Principal, status: ApprovalStatus
    ) -> list[Account]:
        """List accounts in an approval state (admin tier)."""
        AccessService.require_admin(actor)
        return await self.account_repository.find_by_status(status)

    async def review(
        self, actor: Principal, account_id: UserId, status: ApprovalStatus
    ) -> tuple[Account, bool]:
        """Apply an approval decision.

        Deciding a pending account needs the admin tier. Correcting an
        already decided account (approved <-> rejected) needs super_admin.
        Re-applying the current status changes nothing.

        Args:
            actor: Calling principal
            account_id: Account under review
            status: approved or rejected

        Returns:
            (account, changed) where ``changed`` is False for a no-op

        Raises:
            AuthorizationError: If the actor's role is insufficient
            ValidationError: If status is not a decision
            NotFoundError: If the account does not exist
        """
        with logfire.span(
            "account_service.review",
            actor_id=str(actor.id),
            account_id=str(account_id),
            status=status.value,
        ):
            AccessService.require_admin(actor)
            if status == ApprovalStatus.PENDING:
                raise ValidationError("Status must be 'approved' or 'rejected'")

            account = await self.get_account(account_id)
            if account.approval_status == status:
                return account, False

            if account.approval_status != ApprovalStatus.PENDING:
                AccessService.require_super_admin(actor)

            updated = await self.account_repository.save(
                account.with_changes(approval_status=status)
            )
            logfire.info(
                "Approval status changed",
                account_id=str(account_id),
                previous=account.approval_status.value,
                status=status.value,
            )
            return updated, True

    async def change_role(
        self, actor: Principal, account_id: UserId, role: Role
    ) -> tuple[Account, bool]:
        """Change an account's role (super_admin only).

        Returns:
            (account, changed) where ``changed`` is False for a no-op

        Raises:
            AuthorizationError: If the actor is not a super_admin
            NotFoundError: If the account does not exist
        """
        with logfire.span(
            "account_service.change_role",
            actor_id=str(actor.id),
            account_id=str(account_id),
            role=role.value,
        ):
            AccessService.require_super_admin(actor)

            account = await self.get_account(account_id)
            if account.role == role:
                return account, False

            updated = await self.account_repository.save(account.with_changes(role=role))
            logfire.info(
                "Role changed",
                account_id=str(account_id),
                previous=account.role.value,
                role=role.value,
            )
            return updated, True

    async def update_profile(
        self, account_id: UserId, changes: dict[str, object]
    ) -> Account:
        """Apply profile changes from the account owner.

        Keys outside the editable allow-list (role, approval state, email,
        identifiers, credentials) are dropped before anything is applied.

        Args:
            account_id: Account being edited (the caller's own)
            changes: Requested field changes

        Returns:
            Updated account with profile completion recomputed
        """
        with logfire.span("account_service.update_profile", account_id=str(account_id)):
            allowed = {k: v for k, v in changes.items() if k in PROFILE_EDITABLE_FIELDS}
            dropped = sorted(set(changes) - set(allowed))
            if dropped:
                logfire.warn("Dropped protected profile fields", fields=dropped)

            for name in ("first_name", "last_name"):
                if name in allowed:
                    allowed[name] = self._require_text(
                        allowed[name], name.replace("_", " ").capitalize()
                    )

            account = await self.get_account(account_id)
            if not allowed:
                return account
            try:
                updated = account.with_changes(**allowed)
            except PydanticValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
                raise ValidationError(f"Invalid profile fields: {', '.join(fields)}")
            return await self.account_repository.save(updated)

    async def set_password(self, account: Account, new_password: str) -> Account:
        """Replace an account's password."""
        self.validate_password(new_password)
        password_hash = await self.password_service.hash(new_password)
        updated = await self.account_repository.save(
            account.with_changes(password_hash=password_hash)
        )
        logfire.info("Password changed", user_id=str(account.id))
        return updated

    def validate_password(self, password: str) -> None:
        settings = self.registration_settings
        if len(password) < settings.min_password_length:
            raise ValidationError(
                f"Password must be at least {settings.min_password_length} characters"
            )
        if len(password) > settings.max_password_length:
            raise ValidationError(
                f"Password must be at most {settings.max_password_length} characters"
            )

    @staticmethod
    def _validate_email(email: str) -> str:
        try:
            return Email(email).root
        except ValueError:
            raise ValidationError("Invalid email address")

    def _validate_matric_number(self, matric_number: Optional[str]) -> Optional[str]:
        if matric_number is None or not matric_number.strip():
            return None
        try:
            value = MatricNumber(matric_number)
        except ValueError:
            raise ValidationError("Matric number must be 1-50 characters")
        marker = self.registration_settings.department_marker
        if not value.contains_marker(marker):
            raise ValidationError(
                f"Matric number must contain the department code '{marker.upper()}'"
            )
        return value.root

    @staticmethod
    def _require_text(value: object, label: str) -> str:
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            raise ValidationError(f"{label} is required")
        return text
