"""bcrypt password hashing."""

from __future__ import annotations

import bcrypt

# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """One-way password hashing with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (log2 of the work factor).
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check a password against a stored hash.

        Returns:
            True if the password matches. A malformed hash never matches.
        """
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            return False


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
