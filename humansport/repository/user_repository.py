from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def list_users(
    db: Session,
    *,
    role: Optional[str] = None,
    status_filter: Optional[str] = None,
) -> List[User]:
    query = db.query(User)
    if role is not None:
        query = query.filter(User.role == role)
    if status_filter is not None:
        query = query.filter(User.status == status_filter)
    return query.order_by(User.id).all()


def create_user(db: Session, user: User) -> User:
    db.add(user)
    return user
