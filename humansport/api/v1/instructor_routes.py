"""API routes for instructors."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from humansport.core.security import require_roles
from humansport.dependencies import get_db
from humansport.models import Role
from humansport.schemas import InstructorCreate, InstructorResponse, InstructorUpdate
from humansport.services.instructor_service import InstructorService

router = APIRouter(
    prefix="/instructors",
    tags=["instructors"],
    dependencies=[Depends(require_roles(Role.ADMIN, Role.RECEPCIONIST))],
)


@router.get("", response_model=List[InstructorResponse])
def list_instructors(db: Session = Depends(get_db)):
    service = InstructorService(db)
    return service.list_instructors()


@router.post("", response_model=InstructorResponse, status_code=status.HTTP_201_CREATED)
def create_instructor(instructor_in: InstructorCreate, db: Session = Depends(get_db)):
    service = InstructorService(db)
    return service.create_instructor(instructor_in)


@router.get("/{instructor_id}", response_model=InstructorResponse)
def get_instructor(instructor_id: int, db: Session = Depends(get_db)):
    service = InstructorService(db)
    return service.get_instructor(instructor_id)


@router.patch("/{instructor_id}", response_model=InstructorResponse)
def update_instructor(
    instructor_id: int, instructor_in: InstructorUpdate, db: Session = Depends(get_db)
):
    service = InstructorService(db)
    return service.update_instructor(instructor_id, instructor_in)


@router.delete("/{instructor_id}", response_model=InstructorResponse)
def delete_instructor(instructor_id: int, db: Session = Depends(get_db)):
    service = InstructorService(db)
    return service.delete_instructor(instructor_id)


__all__ = ["router"]
