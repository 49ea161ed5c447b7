from __future__ import annotations

import logging
from typing import Optional

from humansport.models import Course
from humansport.repository import course_repository, instructor_repository, lifecycle
from humansport.schemas.course import CourseCreate, CourseReplace, CourseUpdate
from humansport.services.base import BaseService, not_found

logger = logging.getLogger(__name__)


class CourseService(BaseService):
    def _ensure_instructor_exists(self, instructor_id: int) -> None:
        if instructor_repository.get_instructor(self.db, instructor_id) is None:
            raise not_found(f"Instructor {instructor_id} not found")

    def list_courses(
        self,
        *,
        status_filter: Optional[str] = None,
        instructor_user_id: Optional[int] = None,
    ) -> list[Course]:
        """List courses; ``instructor_user_id`` narrows to the courses that account teaches."""
        return course_repository.list_courses(
            self.db, status_filter=status_filter, instructor_user_id=instructor_user_id
        )

    def get_course(self, course_id: int) -> Course:
        course = course_repository.get_course(self.db, course_id)
        if course is None:
            raise not_found(f"Course {course_id} not found")
        return course

    def create_course(self, course_in: CourseCreate) -> Course:
        self._ensure_instructor_exists(course_in.instructor_id)

        course = Course(
            name=course_in.name,
            description=course_in.description,
            capacity=course_in.capacity,
            instructor_id=course_in.instructor_id,
            class_days=[day.model_dump(by_alias=True) for day in course_in.class_days],
            status="active",
        )
        course_repository.create_course(self.db, course)
        course = self._commit(course, "Failed to create course")
        logger.info("Created course %s", course.id)
        return course

    def update_course(self, course_id: int, course_in: CourseUpdate) -> Course:
        course = self.get_course(course_id)
        update_data = course_in.model_dump(exclude_unset=True, exclude={"class_days"})

        if update_data.get("instructor_id") is not None:
            self._ensure_instructor_exists(update_data["instructor_id"])

        for field, value in update_data.items():
            if value is not None:
                setattr(course, field, value)

        if course_in.class_days is not None:
            course.class_days = [day.model_dump(by_alias=True) for day in course_in.class_days]

        return self._commit(course, "Failed to update course")

    def replace_course(self, course_id: int, course_in: CourseReplace) -> Course:
        course = self.get_course(course_id)
        course.name = course_in.name
        course.description = course_in.description
        course.capacity = course_in.capacity
        return self._commit(course, "Failed to update course")

    def delete_course(self, course_id: int) -> Course:
        course = self.get_course(course_id)
        lifecycle.soft_delete(self.db, course)
        course = self._commit(course, "Failed to delete course")
        logger.info("Deactivated course %s", course.id)
        return course
