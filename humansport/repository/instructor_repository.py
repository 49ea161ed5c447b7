from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models import Instructor


def list_instructors(db: Session) -> List[Instructor]:
    return db.query(Instructor).order_by(Instructor.id).all()


def get_instructor(db: Session, instructor_id: int) -> Optional[Instructor]:
    return db.query(Instructor).filter(Instructor.id == instructor_id).first()


def create_instructor(db: Session, instructor: Instructor) -> Instructor:
    db.add(instructor)
    return instructor


def delete_instructor(db: Session, instructor: Instructor) -> None:
    db.delete(instructor)
