from uuid import UUID

from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.access_decision import AccessDecision
from portal_access.domain.entities import Capability
from portal_access.libs.result import Error, Result, Return

from .dtos import BoardMemberInfo, BoardMembersResponse


class ListBoardMembersUseCase:
    """Lists the members of a board for a caller holding view_members."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_retry
    async def execute(self, decision: AccessDecision, board_id: UUID) -> Result[BoardMembersResponse]:
        if decision.board_id != board_id or not decision.can(Capability.view_members):
            return Return.err(
                Error("INSUFFICIENT_ROLE", "You do not have permission to view members")
            )

        async with self.uow:
            memberships = await self.uow.memberships.get_by_board_id(board_id)

            members = []
            for membership in sorted(memberships, key=lambda m: m.joined_at):
                customer = await self.uow.customers.get_by_id(membership.customer_id)
                if customer is None:
                    continue
                members.append(
                    BoardMemberInfo(
                        customer_id=str(customer.id),
                        email=customer.email,
                        first_name=customer.first_name or "",
                        last_name=customer.last_name or "",
                        role=membership.role.value,
                        joined_at=membership.joined_at.isoformat(),
                    )
                )

        return Return.ok(BoardMembersResponse(board_id=str(board_id), members=members))
