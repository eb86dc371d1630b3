"""Administrator authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Header, status

from student_admin.api.dependencies import AuthServiceDep
from student_admin.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    admin_to_response,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
def login(credentials: LoginRequest, auth: AuthServiceDep) -> LoginResponse:
    """Authenticate an administrator and issue a bearer token."""
    admin = auth.login(credentials.email, credentials.password)
    return admin_to_response(admin)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def register(account: RegisterRequest, auth: AuthServiceDep) -> MessageResponse:
    """Register a new administrator. The password is stored hashed."""
    auth.register(account.email, account.password, account.name)
    return MessageResponse(message="Admin registered successfully")


@router.get(
    "/verify",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
def verify(
    auth: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> LoginResponse:
    """Check a bearer token and return the administrator it belongs to."""
    admin = auth.verify_token(authorization)
    return admin_to_response(admin)
