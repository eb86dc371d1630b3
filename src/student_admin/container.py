"""Composition root - builds every collaborator from Settings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from student_admin.auth import AuthService, PasswordHasher, TokenService
from student_admin.config import Settings
from student_admin.records import CredentialStore, Database, StudentStore


@dataclass(frozen=True)
class Services:
    """The wired application collaborators."""

    settings: Settings
    database: Database
    credentials: CredentialStore
    students: StudentStore
    hasher: PasswordHasher
    tokens: TokenService
    auth: AuthService

    def close(self) -> None:
        """Release the database connection."""
        self.database.close()


def build_services(settings: Settings) -> Services:
    """Construct the stores, hasher, token service and auth flow.

    Creates database tables if they don't exist.
    """
    database = Database(settings.db_path)
    database.create_tables()

    credentials = CredentialStore(database)
    students = StudentStore(database)
    hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    tokens = TokenService(
        secret=settings.jwt_secret,
        ttl=timedelta(seconds=settings.token_ttl_seconds),
        algorithm=settings.jwt_algorithm,
    )
    auth = AuthService(credentials=credentials, hasher=hasher, tokens=tokens)

    return Services(
        settings=settings,
        database=database,
        credentials=credentials,
        students=students,
        hasher=hasher,
        tokens=tokens,
        auth=auth,
    )
