"""Password hashing domain service."""

import asyncio

import logfire

from portal.config import AuthSettings
from portal.util.password import hash_fingerprint, hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Hashes and verifies passwords.

    bcrypt is CPU-bound, so work runs in a worker thread to keep the event
    loop responsive.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings
        self._dummy_hash: str | None = None

    async def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password (never logged)

        Returns:
            bcrypt hash
        """
        with logfire.span("password_service.hash"):
            return await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )

    async def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against a stored hash.

        When there is no stored hash (unknown account) the password is
        checked against a throwaway hash so both paths cost the same.

        Args:
            password: Plaintext password
            password_hash: Stored hash, or None if the account does not exist

        Returns:
            True only if a stored hash exists and matches
        """
        with logfire.span("password_service.verify"):
            if password_hash is None:
                await asyncio.to_thread(verify_password, password, await self._dummy())
                return False
            return await asyncio.to_thread(verify_password, password, password_hash)

    def fingerprint(self, password_hash: str) -> str:
        return hash_fingerprint(password_hash)

    async def _dummy(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await asyncio.to_thread(
                hash_password, "unused-password", self.auth_settings.bcrypt_rounds
            )
        return self._dummy_hash
