"""
Resolve Access Use Case (the access gate)

Decides, per request, whether a session may open a board and as what role.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from portal_access.app.services.session_resolver import resolve_session
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.access_decision import AccessDecision, AccessDenialReason
from portal_access.domain.base import utcnow
from portal_access.domain.entities import CustomerBoard
from portal_access.libs.result import Result, Return


class ResolveAccessUseCase:
    """
    Access gate for customer boards.

    Algorithm:
    1. Missing or inactive board -> board_not_found
    2. Public board (is_public and access_type=public) -> allowed without a
       session; a live session with a membership gets its member role,
       everyone else is an anonymous viewer
    3. Restricted board without a live session -> requires_authentication
       (not_signed_in)
    4. Live session with membership -> allowed with the membership role
    5. Live session without membership -> requires_authentication
       (not_a_member)

    Holds no state and caches nothing: membership and board configuration
    can change between visits.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, board_id: UUID, session_token: Optional[str]) -> Result[AccessDecision]:
        async with self.uow:
            board = await self.uow.boards.get_by_id(board_id)
            decision = await self._decide(board, session_token)
        return Return.ok(decision)

    @store_retry
    async def execute_by_slug(
        self, organization: str, board_slug: str, session_token: Optional[str]
    ) -> Result[AccessDecision]:
        async with self.uow:
            board = await self.uow.boards.get_by_slug(organization, board_slug)
            decision = await self._decide(board, session_token)
        return Return.ok(decision)

    async def _decide(
        self, board: Optional[CustomerBoard], session_token: Optional[str]
    ) -> AccessDecision:
        if board is None or not board.is_active:
            return AccessDecision.board_not_found()

        authenticated = await resolve_session(self.uow, session_token, self.clock())

        if not board.requires_membership:
            if authenticated is not None:
                membership = await self.uow.memberships.get_by_board_and_customer(
                    board.id, authenticated.customer.id
                )
                if membership is not None:
                    return AccessDecision.allow_member(
                        board.id, authenticated.customer.id, membership.role
                    )
                return AccessDecision.allow_anonymous(board.id, authenticated.customer.id)
            return AccessDecision.allow_anonymous(board.id)

        if authenticated is None:
            return AccessDecision.requires_authentication(
                board.id, AccessDenialReason.not_signed_in
            )

        membership = await self.uow.memberships.get_by_board_and_customer(
            board.id, authenticated.customer.id
        )
        if membership is None:
            return AccessDecision.requires_authentication(
                board.id, AccessDenialReason.not_a_member, authenticated.customer.id
            )

        return AccessDecision.allow_member(board.id, authenticated.customer.id, membership.role)
