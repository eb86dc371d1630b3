"""Data models for the auth flow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedAdmin:
    """An administrator identity backed by a bearer token.

    Attributes:
        token: The raw bearer token (without scheme prefix).
        email: The administrator's email.
        name: The administrator's display name.
    """

    token: str
    email: str
    name: str
