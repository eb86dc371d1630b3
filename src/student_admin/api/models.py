"""Pydantic models for REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body returned with every error status."""

    error: str


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


# Auth models


class LoginRequest(BaseModel):
    """Request model for administrator login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Request model for administrator registration."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)


class LoginResponse(BaseModel):
    """Response model for login and token verification."""

    model_config = ConfigDict(from_attributes=True)

    token: str
    email: str
    name: str


def admin_to_response(admin: Any) -> LoginResponse:
    """Convert an AuthenticatedAdmin to LoginResponse."""
    return LoginResponse.model_validate(admin)


# Student models


class StudentPayload(BaseModel):
    """Request model for creating or fully replacing a student."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    course: str = Field(..., min_length=1, max_length=255)
    marks: float | None = Field(default=None, allow_inf_nan=False)


class MarksUpdate(BaseModel):
    """Request model for updating only a student's marks."""

    marks: float | None = Field(default=None, allow_inf_nan=False)


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    course: str
    marks: float | None


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student model to StudentResponse."""
    return StudentResponse.model_validate(student)
