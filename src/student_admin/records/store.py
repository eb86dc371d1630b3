"""Credential and student record stores.

Lookups that miss return ``None`` (or a zero count) instead of raising, so
callers decide how a missing record is reported. Database failures are
wrapped in :class:`RecordStoreError`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from student_admin.records.exceptions import AdministratorExistsError, RecordStoreError
from student_admin.records.models import Administrator, Student

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session

    from student_admin.records.database import Database

logger = logging.getLogger(__name__)


class _BaseStore:
    """Shared session handling for the stores."""

    def __init__(self, database: Database) -> None:
        self._db = database

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session = self._db.get_session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Database error during %s", operation)
            raise RecordStoreError(f"Database error during {operation}") from e
        finally:
            session.close()


class CredentialStore(_BaseStore):
    """Storage for administrator accounts, keyed by email."""

    def find_by_email(self, email: str) -> Administrator | None:
        """Get an administrator by email.

        Args:
            email: The administrator's email

        Returns:
            The Administrator, or None if no account uses this email
        """
        with self._session("find_by_email") as session:
            stmt = select(Administrator).where(Administrator.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def save(self, admin: Administrator) -> Administrator:
        """Insert an administrator, or replace the one with the same id.

        Args:
            admin: The administrator to persist

        Returns:
            The persisted Administrator

        Raises:
            AdministratorExistsError: If another account already uses the email
        """
        session = self._db.get_session()
        try:
            merged = session.merge(admin)
            session.commit()
            session.refresh(merged)
            return merged
        except IntegrityError as e:
            session.rollback()
            raise AdministratorExistsError(
                f"Administrator with email '{admin.email}' already exists"
            ) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Database error during save")
            raise RecordStoreError("Database error during save") from e
        finally:
            session.close()

    def delete(self, admin_id: str) -> bool:
        """Delete an administrator by id.

        Returns:
            True if an account was deleted, False if none matched
        """
        with self._session("delete") as session:
            admin = session.get(Administrator, admin_id)
            if admin is None:
                return False
            session.delete(admin)
            session.commit()
            return True


class StudentStore(_BaseStore):
    """CRUD storage for student records."""

    def find_all(self) -> list[Student]:
        """List all students, ordered by name."""
        with self._session("find_all") as session:
            stmt = select(Student).order_by(Student.name, Student.id)
            return list(session.execute(stmt).scalars().all())

    def find_by_id(self, student_id: str) -> Student | None:
        """Get a student by id, or None if it doesn't exist."""
        with self._session("find_by_id") as session:
            return session.get(Student, student_id)

    def save(self, student: Student) -> Student:
        """Persist a new student record.

        Returns:
            The created Student with its generated id
        """
        with self._session("save") as session:
            session.add(student)
            session.commit()
            session.refresh(student)
            return student

    def update(
        self,
        student_id: str,
        name: str,
        email: str,
        course: str,
        marks: float | None,
    ) -> Student | None:
        """Replace every field of an existing student.

        Returns:
            The updated Student, or None if it doesn't exist
        """
        with self._session("update") as session:
            student = session.get(Student, student_id)
            if student is None:
                return None

            student.name = name
            student.email = email
            student.course = course
            student.marks = marks

            session.commit()
            session.refresh(student)
            return student

    def update_marks(self, student_id: str, marks: float) -> Student | None:
        """Update only the marks of an existing student.

        Returns:
            The updated Student, or None if it doesn't exist
        """
        with self._session("update_marks") as session:
            student = session.get(Student, student_id)
            if student is None:
                return None

            student.marks = marks

            session.commit()
            session.refresh(student)
            return student

    def delete_by_email(self, email: str) -> int:
        """Delete every student with the given email.

        Returns:
            Number of deleted records (0 if none matched)
        """
        with self._session("delete_by_email") as session:
            result = session.execute(delete(Student).where(Student.email == email))
            session.commit()
            return result.rowcount or 0
