"""
Accept Invitation Use Case

Redeems a board invitation for the customer behind a session token.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from portal_access.app.services.credentials import hash_token, is_well_formed_token
from portal_access.app.services.session_resolver import resolve_session
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent, BoardMembership, InvitationStatus
from portal_access.domain.errors import DuplicateRecordError
from portal_access.libs.result import Error, Result, Return

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)

INVITATION_NOT_FOUND = Error("INVITATION_NOT_FOUND", "Invitation not found")
INVITATION_EXPIRED = Error("INVITATION_EXPIRED", "This invitation has expired")
INVITATION_ALREADY_ACCEPTED = Error(
    "INVITATION_ALREADY_ACCEPTED", "This invitation has already been accepted"
)


class AcceptInvitationUseCase:
    """
    Use case for accepting board invitations.

    Business Rules:
    - Session token must resolve to a live customer (UNAUTHENTICATED)
    - Invitation must exist (INVITATION_NOT_FOUND)
    - Accepted invitations are terminal (INVITATION_ALREADY_ACCEPTED)
    - Invitations are redeemable only while now < expires_at (INVITATION_EXPIRED)
    - Consumption is a compare-and-set on accepted_at in the store, so of
      concurrent callers exactly one wins and the rest see ALREADY_ACCEPTED
    - The token is single-use whichever customer redeems it; the invited
      email is not matched against the redeeming customer
    - An existing membership on the board gets the invitation's role
      (most recent administrative intent wins)
    - Consumption and membership write commit together
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(
        self, token: str, session_token: Optional[str]
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Raw invitation token from the invitation URL
            session_token: Opaque customer session token

        Returns:
            Result with AcceptInvitationResponse, or Error
        """
        now = self.clock()

        async with self.uow:
            authenticated = await resolve_session(self.uow, session_token, now)
            if authenticated is None:
                return Return.err(
                    Error("UNAUTHENTICATED", "Please sign in to accept this invitation")
                )
            customer = authenticated.customer

            if not is_well_formed_token(token):
                return Return.err(INVITATION_NOT_FOUND)

            invitation = await self.uow.invitations.get_by_token_hash(hash_token(token.strip()))
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            status = invitation.status(now)
            if status == InvitationStatus.accepted:
                return Return.err(INVITATION_ALREADY_ACCEPTED)
            if status == InvitationStatus.expired:
                return Return.err(INVITATION_EXPIRED)

            consumed = await self.uow.invitations.mark_accepted(invitation.id, customer.id, now)
            if not consumed:
                logger.info("Invitation %s lost an acceptance race", invitation.id)
                return Return.err(INVITATION_ALREADY_ACCEPTED)

            membership = await self.uow.memberships.get_by_board_and_customer(
                invitation.board_id, customer.id
            )
            previous_role = None
            if membership is None:
                try:
                    membership = await self.uow.memberships.create(
                        BoardMembership(
                            board_id=invitation.board_id,
                            customer_id=customer.id,
                            role=invitation.role,
                            invited_by_invitation_id=invitation.id,
                            joined_at=now,
                        )
                    )
                except DuplicateRecordError:
                    # Membership appeared concurrently; fall through to the update path
                    membership = await self.uow.memberships.get_by_board_and_customer(
                        invitation.board_id, customer.id
                    )

            if membership.invited_by_invitation_id != invitation.id:
                previous_role = membership.role.value
                membership.role = invitation.role
                membership.invited_by_invitation_id = invitation.id
                membership.updated_at = now
                membership = await self.uow.memberships.update(membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    board_id=invitation.board_id,
                    customer_id=customer.id,
                    action="invitation_accepted",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "role": invitation.role.value,
                        "previous_role": previous_role,
                    },
                    created_at=now,
                )
            )

            await self.uow.commit()

            logger.info(
                "Customer %s joined board %s as %s",
                customer.id,
                invitation.board_id,
                invitation.role.value,
            )

            return Return.ok(
                AcceptInvitationResponse(
                    board_id=str(invitation.board_id),
                    membership_id=str(membership.id),
                    role=membership.role.value,
                    previous_role=previous_role,
                )
            )
