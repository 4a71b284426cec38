"""
Change Member Role Use Case

Handles changing a customer's role on a board.
"""

from datetime import datetime
from typing import Callable
from uuid import UUID

from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.access_decision import AccessDecision
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent, BoardRole, Capability
from portal_access.libs.result import Error, Result, Return

from .dtos import ChangeMemberRoleResponse


class ChangeMemberRoleUseCase:
    """
    Use case for changing a member's role on a board.

    Business Rules:
    - Caller's access decision must grant change_member_roles
    - Role must be a valid BoardRole
    - Admins cannot change their own role
    - Target must already be a member
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(
        self,
        decision: AccessDecision,
        board_id: UUID,
        target_customer_id: UUID,
        new_role: str,
    ) -> Result[ChangeMemberRoleResponse]:
        try:
            board_role = BoardRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {new_role}. Must be one of: admin, member, viewer",
                )
            )

        if decision.board_id != board_id or not decision.can(Capability.change_member_roles):
            return Return.err(
                Error("INSUFFICIENT_ROLE", "Only board admins can change member roles")
            )

        if decision.customer_id == target_customer_id:
            return Return.err(
                Error("CANNOT_CHANGE_OWN_ROLE", "Admins cannot change their own role")
            )

        async with self.uow:
            membership = await self.uow.memberships.get_by_board_and_customer(
                board_id, target_customer_id
            )
            if membership is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "Customer is not a member of this board")
                )

            now = self.clock()
            previous_role = membership.role.value
            membership.role = board_role
            membership.updated_at = now
            await self.uow.memberships.update(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    board_id=board_id,
                    customer_id=decision.customer_id,
                    action="member_role_changed",
                    event_metadata={
                        "target_customer_id": str(target_customer_id),
                        "old_role": previous_role,
                        "new_role": board_role.value,
                    },
                    created_at=now,
                )
            )

            await self.uow.commit()

            return Return.ok(
                ChangeMemberRoleResponse(
                    status="updated",
                    customer_id=str(target_customer_id),
                    role=board_role.value,
                    previous_role=previous_role,
                )
            )
