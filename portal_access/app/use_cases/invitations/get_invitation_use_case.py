from datetime import datetime
from typing import Callable

from portal_access.app.services.credentials import hash_token, is_well_formed_token
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.libs.result import Error, Result, Return

from .dtos import InvitationDetails


class GetInvitationUseCase:
    """Loads an invitation by its raw token for the public invitation page."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, token: str) -> Result[InvitationDetails]:
        if not is_well_formed_token(token):
            return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(hash_token(token.strip()))
            if invitation is None:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            board = await self.uow.boards.get_by_id(invitation.board_id)

        return Return.ok(
            InvitationDetails(
                id=str(invitation.id),
                board_id=str(invitation.board_id),
                board_name=board.name if board else "",
                email=invitation.email,
                role=invitation.role.value,
                status=invitation.status(self.clock()).value,
                expires_at=invitation.expires_at.isoformat(),
                accepted_at=invitation.accepted_at.isoformat() if invitation.accepted_at else None,
            )
        )
