"""Database helpers for payment persistence."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from humansport.models.payment import Payment, PaymentStatus


def list_payments(
    db: Session,
    *,
    status_filter: Optional[str] = None,
    user_id: Optional[int] = None,
) -> list[Payment]:
    query = db.query(Payment)

    if status_filter is not None:
        query = query.filter(Payment.status == status_filter)
    if user_id is not None:
        query = query.filter(Payment.user_id == user_id)

    return query.order_by(Payment.created_at.desc(), Payment.id.desc()).all()


def get_payment(db: Session, payment_id: int) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.id == payment_id).first()


def get_latest_completed_payment(db: Session, user_id: int) -> Optional[Payment]:
    return (
        db.query(Payment)
        .filter(
            Payment.user_id == user_id,
            Payment.status == PaymentStatus.COMPLETED.value,
        )
        .order_by(Payment.updated_at.desc(), Payment.id.desc())
        .first()
    )


def create_payment(db: Session, payment: Payment) -> Payment:
    db.add(payment)
    return payment


__all__ = [
    "list_payments",
    "get_payment",
    "get_latest_completed_payment",
    "create_payment",
]
