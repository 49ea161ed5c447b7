"""Data access helpers for the membership catalog."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models import Membership


def list_memberships(db: Session, *, status_filter: Optional[str] = None) -> List[Membership]:
    query = db.query(Membership)
    if status_filter is not None:
        query = query.filter(Membership.status == status_filter)
    return query.order_by(Membership.id).all()


def get_membership(db: Session, membership_id: int) -> Optional[Membership]:
    return db.query(Membership).filter(Membership.id == membership_id).first()


def create_membership(db: Session, membership: Membership) -> Membership:
    db.add(membership)
    return membership
