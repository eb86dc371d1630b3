"""AuthService - login, registration and bearer token verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from student_admin.auth.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedTokenError,
)
from student_admin.auth.models import AuthenticatedAdmin
from student_admin.logging import sanitize_for_log
from student_admin.records import Administrator, AdministratorExistsError, RecordStoreError

if TYPE_CHECKING:
    from student_admin.auth.passwords import PasswordHasher
    from student_admin.auth.tokens import TokenService
    from student_admin.records import CredentialStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AuthService:
    """Administrator authentication flow.

    Each operation is self-contained: no session state is kept between calls.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._credentials = credentials
        self._hasher = hasher
        self._tokens = tokens

    def login(self, email: str, password: str) -> AuthenticatedAdmin:
        """Check credentials and issue a token.

        Args:
            email: Administrator email
            password: Plain-text password

        Returns:
            The issued token with the administrator's email and name

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        admin = self._credentials.find_by_email(email)
        if admin is None or not self._hasher.verify(password, admin.password_hash):
            logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentialsError("Invalid email or password")

        token = self._tokens.issue(admin.email)
        logger.info("Administrator %s logged in", admin.email)
        return AuthenticatedAdmin(token=token, email=admin.email, name=admin.name)

    def register(self, email: str, password: str, name: str) -> Administrator:
        """Create a new administrator account. Does not log in.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        if self._credentials.find_by_email(email) is not None:
            raise DuplicateEmailError("Email already exists")

        admin = Administrator(email=email, password_hash=self._hasher.hash(password), name=name)
        try:
            saved = self._credentials.save(admin)
        except AdministratorExistsError as e:
            # Lost a race with a concurrent registration
            raise DuplicateEmailError("Email already exists") from e

        logger.info("Registered administrator %s", saved.email)
        return saved

    def verify_token(self, authorization: str | None) -> AuthenticatedAdmin:
        """Validate an Authorization header value.

        The token is only read, never refreshed or re-signed.

        Args:
            authorization: Header value in the form "Bearer <token>"

        Returns:
            The unchanged token with the administrator's current email and name

        Raises:
            InvalidTokenError: If the header or token is invalid or expired, or the
                administrator no longer exists
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise InvalidTokenError("Missing bearer token")
        token = authorization[len(BEARER_PREFIX) :]

        try:
            email = self._tokens.extract_email(token)
        except MalformedTokenError as e:
            logger.warning("Rejected malformed token: %s", sanitize_for_log(str(e)))
            raise InvalidTokenError("Invalid token") from e

        if self._tokens.is_expired(token):
            logger.info("Rejected expired token for %s", email)
            raise InvalidTokenError("Token expired")

        try:
            admin = self._credentials.find_by_email(email)
        except RecordStoreError as e:
            raise InvalidTokenError("Invalid token") from e
        if admin is None:
            logger.warning("Rejected token for unknown administrator %s", email)
            raise InvalidTokenError("Invalid token")

        return AuthenticatedAdmin(token=token, email=admin.email, name=admin.name)
