"""FastAPI dependencies resolving collaborators from the app's Services."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request

from student_admin.auth import AuthenticatedAdmin, AuthService
from student_admin.container import Services
from student_admin.records import StudentStore


def get_services(request: Request) -> Services:
    """Dependency that provides the Services built for this app."""
    services: Services | None = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized. Start the app through its lifespan.")
    return services


ServicesDep = Annotated[Services, Depends(get_services)]


def get_auth_service(services: ServicesDep) -> AuthService:
    """Dependency that provides the AuthService."""
    return services.auth


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def get_student_store(services: ServicesDep) -> StudentStore:
    """Dependency that provides the StudentStore."""
    return services.students


StudentStoreDep = Annotated[StudentStore, Depends(get_student_store)]


def require_admin(
    auth: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedAdmin:
    """Dependency that rejects requests without a valid bearer token."""
    return auth.verify_token(authorization)

