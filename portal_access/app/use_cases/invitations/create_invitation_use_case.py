"""
Create Invitation Use Case

Issues single-use, time-bounded invitations to a customer board.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from config import ApplicationConfig
from portal_access.app.services.credentials import generate_token, hash_token, normalize_email
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent, BoardInvitation, BoardRole
from portal_access.libs.result import Error, Result, Return

from .dtos import InvitationCreatedResponse

logger = logging.getLogger(__name__)


def invitation_url(token: str) -> str:
    return f"{ApplicationConfig.PUBLIC_BASE_URL.rstrip('/')}/invitation/{token}"


class CreateInvitationUseCase:
    """
    Use case for inviting an email address to a board.

    Business Rules:
    - Board must exist in the registry
    - Role must be a valid BoardRole
    - expires_at = now + ttl (default INVITATION_TTL_HOURS)
    - Token is cryptographically random, only its hash is stored
    - Several pending invitations for the same (board, email) may coexist;
      whichever is accepted last decides the role
    - Authorization of the inviter is done by the caller (admin API key, or
      the invite_members capability from the access gate)
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(
        self,
        board_id: UUID,
        email: str,
        role: str,
        ttl: Optional[timedelta] = None,
        invited_by: Optional[UUID] = None,
    ) -> Result[InvitationCreatedResponse]:
        """
        Execute create invitation use case.

        Args:
            board_id: Target board
            email: Invitee email address
            role: Role granted on acceptance (admin/member/viewer)
            ttl: Time to live, defaults to INVITATION_TTL_HOURS
            invited_by: Customer id of the inviting board admin, if any

        Returns:
            Result with InvitationCreatedResponse, or Error
        """
        try:
            board_role = BoardRole(role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: admin, member, viewer",
                )
            )

        if ttl is None:
            ttl = timedelta(hours=ApplicationConfig.INVITATION_TTL_HOURS)
        if ttl <= timedelta(0):
            return Return.err(Error("INVALID_TTL", "Invitation lifetime must be positive"))
        if ttl > timedelta(hours=ApplicationConfig.INVITATION_MAX_TTL_HOURS):
            return Return.err(
                Error(
                    "INVALID_TTL",
                    f"Invitation lifetime cannot exceed {ApplicationConfig.INVITATION_MAX_TTL_HOURS} hours",
                )
            )

        async with self.uow:
            board = await self.uow.boards.get_by_id(board_id)
            if board is None:
                return Return.err(Error("BOARD_NOT_FOUND", "Board not found"))

            now = self.clock()
            token = generate_token()
            invitation = BoardInvitation(
                board_id=board.id,
                email=normalize_email(email),
                role=board_role,
                token_hash=hash_token(token),
                invited_by=invited_by,
                created_at=now,
                expires_at=now + ttl,
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.audit_events.create(
                AuditEvent(
                    board_id=board.id,
                    customer_id=invited_by,
                    action="invitation_created",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "invited_email": invitation.email,
                        "role": board_role.value,
                    },
                    created_at=now,
                )
            )

            await self.uow.commit()

            logger.info("Invitation %s created for board %s", invitation.id, board.id)

            return Return.ok(
                InvitationCreatedResponse(
                    invitation_id=str(invitation.id),
                    board_id=str(board.id),
                    email=invitation.email,
                    role=board_role.value,
                    token=token,
                    invitation_url=invitation_url(token),
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
