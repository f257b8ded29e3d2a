"""Password hashing utilities (bcrypt)."""

import hashlib

import bcrypt

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text
    """
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash.

    Comparison is delegated to bcrypt. A malformed hash never verifies.
    """
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
    except ValueError:
        return False


def hash_fingerprint(password_hash: str) -> str:
    """Short digest of a stored hash.

    Embedded in reset tokens so a token stops verifying once the password
    it was issued against has changed.
    """
    return hashlib.sha256(password_hash.encode("utf-8")).hexdigest()[:16]
