"""Exceptions for the auth flow."""


class AuthError(Exception):
    """Base exception for authentication errors."""


class InvalidCredentialsError(AuthError):
    """Email unknown or password wrong.

    The two cases are indistinguishable to the caller.
    """


class DuplicateEmailError(AuthError):
    """An administrator with this email is already registered."""


class InvalidTokenError(AuthError):
    """Bearer token is missing, malformed, expired, or its subject is unknown."""


class MalformedTokenError(AuthError):
    """Token cannot be parsed or its signature does not verify."""
