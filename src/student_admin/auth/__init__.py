"""Auth package - administrator login, registration and token verification."""

from student_admin.auth.exceptions import (
    AuthError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedTokenError,
)
from student_admin.auth.models import AuthenticatedAdmin
from student_admin.auth.passwords import PasswordHasher
from student_admin.auth.service import BEARER_PREFIX, AuthService
from student_admin.auth.tokens import TokenService

__all__ = [
    "BEARER_PREFIX",
    "AuthError",
    "AuthService",
    "AuthenticatedAdmin",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedTokenError",
    "PasswordHasher",
    "TokenService",
]
