from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from humansport.models import Instructor
from humansport.repository import instructor_repository, user_repository
from humansport.schemas.instructor import InstructorCreate, InstructorResponse, InstructorUpdate
from humansport.services.base import BaseService, not_found, persistence_error

ACCOUNT_TAKEN_DETAIL = "User account is already linked to another instructor"


class InstructorService(BaseService):
    def _ensure_user_exists(self, user_id: Optional[int]) -> None:
        if user_id is not None and user_repository.get_user_by_id(self.db, user_id) is None:
            raise not_found("Associated user not found")

    def list_instructors(self) -> list[Instructor]:
        return instructor_repository.list_instructors(self.db)

    def get_instructor(self, instructor_id: int) -> Instructor:
        instructor = instructor_repository.get_instructor(self.db, instructor_id)
        if instructor is None:
            raise not_found(f"Instructor {instructor_id} not found")
        return instructor

    def create_instructor(self, instructor_in: InstructorCreate) -> Instructor:
        self._ensure_user_exists(instructor_in.user_id)
        instructor = Instructor(**instructor_in.model_dump())
        instructor_repository.create_instructor(self.db, instructor)
        return self._commit(
            instructor, "Failed to create instructor", conflict_message=ACCOUNT_TAKEN_DETAIL
        )

    def update_instructor(self, instructor_id: int, instructor_in: InstructorUpdate) -> Instructor:
        instructor = self.get_instructor(instructor_id)
        update_data = instructor_in.model_dump(exclude_unset=True)
        self._ensure_user_exists(update_data.get("user_id"))
        for field, value in update_data.items():
            if value is not None:
                setattr(instructor, field, value)
        return self._commit(
            instructor, "Failed to update instructor", conflict_message=ACCOUNT_TAKEN_DETAIL
        )

    def delete_instructor(self, instructor_id: int) -> InstructorResponse:
        instructor = self.get_instructor(instructor_id)
        if instructor.courses:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Instructor is still assigned to courses",
            )
        try:
            removed = InstructorResponse.model_validate(instructor)
            instructor_repository.delete_instructor(self.db, instructor)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise persistence_error("Failed to delete instructor", exc) from exc
        return removed
