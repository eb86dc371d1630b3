"""Record stores - persistent storage for administrators and students."""

from student_admin.records.database import Database
from student_admin.records.exceptions import (
    AdministratorExistsError,
    RecordStoreError,
)
from student_admin.records.models import Administrator, Student
from student_admin.records.store import CredentialStore, StudentStore

__all__ = [
    "Administrator",
    "AdministratorExistsError",
    "CredentialStore",
    "Database",
    "RecordStoreError",
    "Student",
    "StudentStore",
]
