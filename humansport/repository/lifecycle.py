"""Status transitions shared by every soft-deletable model."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy.orm import Session

from humansport.models.mixins import SoftDeleteMixin

EntityT = TypeVar("EntityT", bound=SoftDeleteMixin)


def soft_delete(db: Session, entity: EntityT) -> EntityT:
    """Move ``entity`` from active to inactive; the caller commits.

    Already inactive rows are left as is.
    """

    if entity.is_active:
        entity.deactivate()
        db.add(entity)
    return entity


__all__ = ["soft_delete"]
