"""Derive whether a user currently holds an active membership.

The state is never stored: it comes from the user's most recently updated
completed payment and the duration of the membership plan it paid for.
A membership paid ``d`` whole days ago for a plan of ``D`` days is active
while ``d <= D``, so the day of nominal expiry still counts.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from humansport.models import Membership, Payment, Role, User
from humansport.repository import membership_repository, payment_repository, user_repository
from humansport.schemas.membership import MembershipResponse
from humansport.schemas.membership_status import MembershipStatusResponse
from humansport.schemas.payment import PaymentResponse
from humansport.schemas.user import UserWithMembership

USER_NOT_FOUND = "user not found"
NO_ACTIVE_MEMBERSHIP = "no active membership"
MEMBERSHIP_EXPIRED = "membership expired"


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps (as SQLite returns them) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_elapsed(since: datetime, now: datetime) -> int:
    """Whole days between two instants, truncated."""
    return (as_utc(now) - as_utc(since)).days


def compute_membership_status(
    payment: Payment, membership: Membership, now: datetime
) -> MembershipStatusResponse:
    elapsed = days_elapsed(payment.updated_at, now)
    membership_out = MembershipResponse.model_validate(membership)
    payment_out = PaymentResponse.model_validate(payment)

    if elapsed > membership.duration_days:
        return MembershipStatusResponse(
            active=False,
            reason=MEMBERSHIP_EXPIRED,
            membership=membership_out,
            payment=payment_out,
        )

    remaining = membership.duration_days - elapsed
    return MembershipStatusResponse(
        active=True,
        remaining_days=remaining,
        expiration_date=as_utc(now) + timedelta(days=remaining),
        membership=membership_out,
        payment=payment_out,
    )


class MembershipStatusService:
    def __init__(self, db: Session):
        self.db = db

    def resolve(self, user_id: int, *, now: Optional[datetime] = None) -> MembershipStatusResponse:
        user = user_repository.get_user_by_id(self.db, user_id)
        if user is None:
            return MembershipStatusResponse(active=False, reason=USER_NOT_FOUND)
        return self.resolve_for_user(user, now=now)

    def resolve_for_user(
        self, user: User, *, now: Optional[datetime] = None
    ) -> MembershipStatusResponse:
        evaluated_at = now or datetime.now(timezone.utc)

        payment = payment_repository.get_latest_completed_payment(self.db, user.id)
        if payment is None:
            return MembershipStatusResponse(active=False, reason=NO_ACTIVE_MEMBERSHIP)

        membership = membership_repository.get_membership(self.db, payment.membership_id)
        if membership is None:
            return MembershipStatusResponse(active=False, reason=NO_ACTIVE_MEMBERSHIP)

        return compute_membership_status(payment, membership, evaluated_at)

    def annotate(
        self, users: Iterable[User], *, now: Optional[datetime] = None
    ) -> list[UserWithMembership]:
        """Attach the derived membership to every active member."""

        evaluated_at = now or datetime.now(timezone.utc)
        annotated = []
        for user in users:
            item = UserWithMembership.model_validate(user)
            if user.role == Role.MEMBER.value and user.is_active:
                item.membership = self.resolve_for_user(user, now=evaluated_at)
            annotated.append(item)
        return annotated


__all__ = [
    "MembershipStatusService",
    "compute_membership_status",
    "days_elapsed",
    "as_utc",
]
