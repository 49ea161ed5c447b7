"""Transaction helpers shared by the service classes."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


def persistence_error(message: str, exc: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": message, "errors": [str(exc)]},
    )


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    def _commit(
        self,
        entity: T,
        failure_message: str,
        *,
        conflict_message: Optional[str] = None,
    ) -> T:
        """Write pending changes and reload ``entity``.

        Any database error rolls the session back. Integrity errors become a
        409 when ``conflict_message`` is given, everything else a 500 carrying
        the driver's message.
        """
        try:
            self.db.flush()
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if conflict_message is None:
                logger.error("%s: %s", failure_message, exc)
                raise persistence_error(failure_message, exc) from exc
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=conflict_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("%s: %s", failure_message, exc)
            raise persistence_error(failure_message, exc) from exc
        self.db.refresh(entity)
        return entity


__all__ = ["BaseService", "persistence_error", "not_found"]
