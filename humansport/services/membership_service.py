"""Business logic for the membership catalog."""

from __future__ import annotations

from typing import Optional

from humansport.models import Membership
from humansport.repository import lifecycle, membership_repository
from humansport.schemas.membership import MembershipCreate, MembershipUpdate
from humansport.services.base import BaseService, not_found


class MembershipService(BaseService):
    """Service layer encapsulating membership catalog operations."""

    def list_memberships(self, *, status_filter: Optional[str] = None) -> list[Membership]:
        return membership_repository.list_memberships(self.db, status_filter=status_filter)

    def get_membership(self, membership_id: int) -> Membership:
        membership = membership_repository.get_membership(self.db, membership_id)
        if not membership:
            raise not_found(f"Membership {membership_id} not found")
        return membership

    def create_membership(self, membership_in: MembershipCreate) -> Membership:
        membership = Membership(**membership_in.model_dump(), status="active")
        membership_repository.create_membership(self.db, membership)
        return self._commit(membership, "Failed to create membership")

    def update_membership(
        self, membership_id: int, membership_in: MembershipUpdate
    ) -> Membership:
        membership = self.get_membership(membership_id)
        update_data = membership_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is not None:
                setattr(membership, field, value)
        return self._commit(membership, "Failed to update membership")

    def delete_membership(self, membership_id: int) -> Membership:
        membership = self.get_membership(membership_id)
        lifecycle.soft_delete(self.db, membership)
        return self._commit(membership, "Failed to deactivate membership")
