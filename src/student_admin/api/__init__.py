"""REST API for Student Admin."""

from student_admin.api.app import create_app
from student_admin.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MarksUpdate,
    RegisterRequest,
    StudentPayload,
    StudentResponse,
)

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MarksUpdate",
    "RegisterRequest",
    "StudentPayload",
    "StudentResponse",
    "create_app",
]
