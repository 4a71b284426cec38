from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from portal_access.app.repositories.board_membership_repository import IBoardMembershipRepository
from portal_access.domain.entities import BoardMembership
from portal_access.domain.errors import DuplicateRecordError


class BoardMembershipRepository(IBoardMembershipRepository):
    """BoardMembership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_board_and_customer(
        self, board_id: UUID, customer_id: UUID
    ) -> Optional[BoardMembership]:
        """Get membership by board and customer"""
        stmt = select(BoardMembership).where(
            BoardMembership.board_id == board_id,
            BoardMembership.customer_id == customer_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_board_id(self, board_id: UUID) -> List[BoardMembership]:
        """Get all memberships of a board"""
        stmt = select(BoardMembership).where(BoardMembership.board_id == board_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: BoardMembership) -> BoardMembership:
        """
        Create a new membership.

        Runs in a savepoint so a unique-index collision leaves the enclosing
        transaction (e.g. an invitation consumption) intact.
        """
        try:
            async with self.session.begin_nested():
                self.session.add(membership)
                await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError("membership already exists") from exc
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: BoardMembership) -> BoardMembership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: BoardMembership) -> None:
        """Delete a membership"""
        await self.session.delete(membership)
        await self.session.flush()
