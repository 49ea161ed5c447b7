"""Business logic for managing payments."""

from __future__ import annotations

import logging
from typing import Optional

from humansport.models import Payment, PaymentMethod, PaymentStatus
from humansport.repository import membership_repository, payment_repository, user_repository
from humansport.schemas.payment import PaymentCreate, PaymentStatusUpdate
from humansport.services.base import BaseService, not_found

logger = logging.getLogger(__name__)


def initial_status(method: PaymentMethod) -> PaymentStatus:
    """Cash is settled at the desk; electronic payments wait for confirmation."""
    if method == PaymentMethod.CASH:
        return PaymentStatus.COMPLETED
    return PaymentStatus.PENDING


class PaymentService(BaseService):
    def list_payments(
        self,
        *,
        status_filter: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> list[Payment]:
        return payment_repository.list_payments(
            self.db, status_filter=status_filter, user_id=user_id
        )

    def get_payment(self, payment_id: int) -> Payment:
        payment = payment_repository.get_payment(self.db, payment_id)
        if payment is None:
            raise not_found("Payment not found")
        return payment

    def create_payment(self, payload: PaymentCreate) -> Payment:
        if user_repository.get_user_by_id(self.db, payload.user_id) is None:
            raise not_found("User not found")
        if membership_repository.get_membership(self.db, payload.membership_id) is None:
            raise not_found("Membership not found")

        payment = Payment(
            user_id=payload.user_id,
            membership_id=payload.membership_id,
            amount=payload.amount,
            method=payload.method.value,
            status=initial_status(payload.method).value,
        )
        payment_repository.create_payment(self.db, payment)
        payment = self._commit(payment, "Failed to register payment")
        logger.info(
            "Registered %s payment %s for user %s (%s)",
            payment.method,
            payment.id,
            payment.user_id,
            payment.status,
        )
        return payment

    def update_status(self, payment_id: int, payload: PaymentStatusUpdate) -> Payment:
        payment = self.get_payment(payment_id)
        payment.status = payload.status.value
        return self._commit(payment, "Failed to update payment")


__all__ = ["PaymentService", "initial_status"]
