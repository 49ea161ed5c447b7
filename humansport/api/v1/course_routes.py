"""API routes for courses."""

from typing import List, Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from humansport.core.security import TokenIdentity, require_roles
from humansport.dependencies import get_db
from humansport.models import Role
from humansport.schemas import CourseCreate, CourseReplace, CourseResponse, CourseUpdate
from humansport.services.course_service import CourseService

router = APIRouter(prefix="/courses", tags=["courses"])

course_staff = require_roles(Role.ADMIN, Role.RECEPCIONIST)
authenticated = require_roles()


@router.get("", response_model=List[CourseResponse])
def list_courses(
    status_filter: Literal["active", "inactive", "all"] = Query("active", alias="status"),
    identity: TokenIdentity = Depends(authenticated),
    db: Session = Depends(get_db),
):
    service = CourseService(db)
    # Instructors only see the courses they teach.
    return service.list_courses(
        status_filter=None if status_filter == "all" else status_filter,
        instructor_user_id=identity.id if identity.role == Role.INSTRUCTOR.value else None,
    )


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(course_staff)],
)
def create_course(course_in: CourseCreate, db: Session = Depends(get_db)):
    service = CourseService(db)
    return service.create_course(course_in)


@router.get("/{course_id}", response_model=CourseResponse, dependencies=[Depends(authenticated)])
def get_course(course_id: int, db: Session = Depends(get_db)):
    service = CourseService(db)
    return service.get_course(course_id)


@router.patch("/{course_id}", response_model=CourseResponse, dependencies=[Depends(course_staff)])
def update_course(course_id: int, course_in: CourseUpdate, db: Session = Depends(get_db)):
    service = CourseService(db)
    return service.update_course(course_id, course_in)


@router.put("/{course_id}", response_model=CourseResponse, dependencies=[Depends(course_staff)])
def replace_course(course_id: int, course_in: CourseReplace, db: Session = Depends(get_db)):
    service = CourseService(db)
    return service.replace_course(course_id, course_in)


@router.delete("/{course_id}", response_model=CourseResponse, dependencies=[Depends(course_staff)])
def delete_course(course_id: int, db: Session = Depends(get_db)):
    service = CourseService(db)
    return service.delete_course(course_id)


__all__ = ["router"]
