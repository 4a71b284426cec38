"""
Remove Member Use Case

Handles removing customers from a board.
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

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing members from a board.

    Business Rules:
    - Caller's access decision must grant remove_members
    - Target must be a member
    - The last admin of a board cannot be removed
    - Membership row is deleted; the audit event keeps the trace
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(
        self, decision: AccessDecision, board_id: UUID, target_customer_id: UUID
    ) -> Result[RemoveMemberResponse]:
        if decision.board_id != board_id or not decision.can(Capability.remove_members):
            return Return.err(
                Error("INSUFFICIENT_ROLE", "Only board admins can remove members")
            )

        async with self.uow:
            membership = await self.uow.memberships.get_by_board_and_customer(
                board_id, target_customer_id
            )
            if membership is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "Customer is not a member of this board")
                )

            if membership.role.at_least(BoardRole.admin):
                memberships = await self.uow.memberships.get_by_board_id(board_id)
                admin_count = sum(1 for m in memberships if m.role.at_least(BoardRole.admin))
                if admin_count <= 1:
                    return Return.err(
                        Error(
                            "CANNOT_REMOVE_LAST_ADMIN",
                            "Cannot remove the last admin of a board",
                        )
                    )

            removed_role = membership.role.value
            await self.uow.memberships.delete(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    board_id=board_id,
                    customer_id=decision.customer_id,
                    action="member_removed",
                    event_metadata={
                        "removed_customer_id": str(target_customer_id),
                        "removed_role": removed_role,
                    },
                    created_at=self.clock(),
                )
            )

            await self.uow.commit()

            return Return.ok(RemoveMemberResponse(status="removed"))
