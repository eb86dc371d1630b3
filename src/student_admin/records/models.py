"""SQLAlchemy models for the record stores."""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Float, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Administrator(Base):
    """Administrator model - an account able to manage student records."""

    __tablename__ = "admins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __init__(
        self,
        email: str,
        password_hash: str,
        name: str,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.email = email
        self.password_hash = password_hash
        self.name = name

    def __repr__(self) -> str:
        return f"<Administrator(id={self.id!r}, email={self.email!r})>"


class Student(Base):
    """Student model - a managed student record.

    Email is deliberately not unique; deleting by email removes every match.
    """

    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    course: Mapped[str] = mapped_column(String(255), nullable=False)
    marks: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __init__(
        self,
        name: str,
        email: str,
        course: str,
        marks: float | None = None,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name
        self.email = email
        self.course = course
        self.marks = marks

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, email={self.email!r}, course={self.course!r})>"
