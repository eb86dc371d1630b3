"""Signed bearer tokens bound to an administrator email."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from student_admin.auth.exceptions import MalformedTokenError


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class TokenService:
    """Issues and inspects HMAC-signed JWTs.

    Tokens carry the administrator email in ``sub`` and an absolute ``exp``
    fixed at issuance. Nothing is stored server-side, so a token stays valid
    until it expires.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the token service.

        Args:
            secret: Signing key.
            ttl: Lifetime of issued tokens.
            algorithm: JWT signing algorithm.
            clock: Returns the current aware datetime. Overridable for tests.
        """
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock
        self.ttl = ttl

    def issue(self, email: str) -> str:
        """Create a signed token for the given email."""
        now = self._clock()
        claims = {
            "sub": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def extract_email(self, token: str) -> str:
        """Return the email a token is bound to.

        The signature is verified; expiry is not (see is_expired).

        Raises:
            MalformedTokenError: If the token cannot be parsed or verified.
        """
        claims = self._decode(token)
        email = claims.get("sub")
        if not isinstance(email, str) or not email:
            raise MalformedTokenError("Token has no subject")
        return email

    def is_expired(self, token: str) -> bool:
        """Check whether a token's expiry has passed.

        Tokens that cannot be parsed or verified count as expired.
        """
        try:
            claims = self._decode(token)
        except MalformedTokenError:
            return True

        exp = claims.get("exp")
        if not isinstance(exp, int | float):
            return True
        return exp <= self._clock().timestamp()

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise MalformedTokenError(str(e)) from e
