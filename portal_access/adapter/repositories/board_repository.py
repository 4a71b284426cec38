from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from portal_access.app.repositories.board_repository import IBoardRepository
from portal_access.domain.entities import CustomerBoard


class BoardRepository(IBoardRepository):
    """Read-only board registry backed by the customer_boards table"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, board_id: UUID) -> Optional[CustomerBoard]:
        """Get board by ID"""
        stmt = select(CustomerBoard).where(CustomerBoard.id == board_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, organization: str, slug: str) -> Optional[CustomerBoard]:
        """Get board by organization slug and board slug"""
        stmt = select(CustomerBoard).where(
            CustomerBoard.organization == organization,
            CustomerBoard.slug == slug,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()
