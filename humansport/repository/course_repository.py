from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models import Course, Instructor


def list_courses(
    db: Session,
    *,
    status_filter: Optional[str] = None,
    instructor_user_id: Optional[int] = None,
) -> List[Course]:
    query = db.query(Course)
    if status_filter is not None:
        query = query.filter(Course.status == status_filter)
    if instructor_user_id is not None:
        query = query.join(Course.instructor).filter(Instructor.user_id == instructor_user_id)
    return query.order_by(Course.id).all()


def get_course(db: Session, course_id: int) -> Optional[Course]:
    return db.query(Course).filter(Course.id == course_id).first()


def create_course(db: Session, course: Course) -> Course:
    db.add(course)
    return course
