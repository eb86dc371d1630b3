"""Student CRUD endpoints."""

from fastapi import APIRouter, HTTPException, status

from student_admin.api.dependencies import StudentStoreDep
from student_admin.api.models import (
    ErrorResponse,
    MarksUpdate,
    StudentPayload,
    StudentResponse,
    student_to_response,
)
from student_admin.records import Student

router = APIRouter(prefix="/students", tags=["students"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")


@router.get("", response_model=list[StudentResponse])
def list_students(store: StudentStoreDep) -> list[StudentResponse]:
    """List all students."""
    return [student_to_response(s) for s in store.find_all()]


@router.get("/{student_id}", response_model=StudentResponse, responses=_NOT_FOUND)
def get_student(student_id: str, store: StudentStoreDep) -> StudentResponse:
    """Get a student by ID."""
    student = store.find_by_id(student_id)
    if student is None:
        raise _not_found()
    return student_to_response(student)


@router.post("", response_model=StudentResponse)
def create_student(payload: StudentPayload, store: StudentStoreDep) -> StudentResponse:
    """Create a new student record."""
    created = store.save(
        Student(
            name=payload.name,
            email=payload.email,
            course=payload.course,
            marks=payload.marks,
        )
    )
    return student_to_response(created)


@router.put("/{student_id}", response_model=StudentResponse, responses=_NOT_FOUND)
def update_student(
    student_id: str, payload: StudentPayload, store: StudentStoreDep
) -> StudentResponse:
    """Replace every field of a student."""
    updated = store.update(
        student_id,
        name=payload.name,
        email=payload.email,
        course=payload.course,
        marks=payload.marks,
    )
    if updated is None:
        raise _not_found()
    return student_to_response(updated)


@router.delete(
    "/email/{email}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
def delete_students_by_email(email: str, store: StudentStoreDep) -> None:
    """Delete every student with the given email."""
    if store.delete_by_email(email) == 0:
        raise _not_found()


@router.patch(
    "/{student_id}/marks",
    response_model=StudentResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_NOT_FOUND},
)
def update_marks(student_id: str, update: MarksUpdate, store: StudentStoreDep) -> StudentResponse:
    """Update only the marks of a student."""
    if update.marks is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Marks are required")

    updated = store.update_marks(student_id, update.marks)
    if updated is None:
        raise _not_found()
    return student_to_response(updated)
