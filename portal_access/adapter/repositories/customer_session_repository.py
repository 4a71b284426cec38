from datetime import datetime
from typing import Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from portal_access.app.repositories.customer_session_repository import ICustomerSessionRepository
from portal_access.domain.entities import CustomerSession


class CustomerSessionRepository(ICustomerSessionRepository):
    """CustomerSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[CustomerSession]:
        """
        Get session by token hash.

        Revoked and expired sessions are returned too; liveness is decided
        by the caller against its own clock.
        """
        stmt = select(CustomerSession).where(CustomerSession.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: CustomerSession) -> CustomerSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def revoke_by_token_hash(self, token_hash: str, revoked_at: datetime) -> bool:
        """Revoke exactly one session if it is not already revoked"""
        stmt = (
            update(CustomerSession)
            .where(
                CustomerSession.token_hash == token_hash,
                CustomerSession.revoked == False,  # noqa: E712
            )
            .values(revoked=True, revoked_at=revoked_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
