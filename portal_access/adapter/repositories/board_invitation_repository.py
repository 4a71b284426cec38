from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from portal_access.app.repositories.board_invitation_repository import IBoardInvitationRepository
from portal_access.domain.entities import BoardInvitation


class BoardInvitationRepository(IBoardInvitationRepository):
    """BoardInvitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[BoardInvitation]:
        """Get invitation by token hash"""
        stmt = select(BoardInvitation).where(BoardInvitation.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, invitation: BoardInvitation) -> BoardInvitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_accepted(
        self, invitation_id: UUID, customer_id: UUID, accepted_at: datetime
    ) -> bool:
        """Compare-and-set on accepted_at; only one concurrent caller gets a row"""
        stmt = (
            update(BoardInvitation)
            .where(
                BoardInvitation.id == invitation_id,
                BoardInvitation.accepted_at.is_(None),
                BoardInvitation.expires_at > accepted_at,
            )
            .values(accepted_at=accepted_at, accepted_by=customer_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
