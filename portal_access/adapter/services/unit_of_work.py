import asyncio
import logging

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from portal_access.adapter.repositories.audit_event_repository import AuditEventRepository
from portal_access.adapter.repositories.board_invitation_repository import BoardInvitationRepository
from portal_access.adapter.repositories.board_membership_repository import BoardMembershipRepository
from portal_access.adapter.repositories.board_repository import BoardRepository
from portal_access.adapter.repositories.customer_session_repository import CustomerSessionRepository
from portal_access.adapter.repositories.customer_user_repository import CustomerUserRepository
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.errors import StoreCommitUncertainError, StoreUnavailableError

logger = logging.getLogger(__name__)


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, (OperationalError, PoolTimeoutError, asyncio.TimeoutError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern.

    Always rolls back on exit, so anything not committed is discarded.
    Transient driver failures leave as StoreUnavailableError, except during
    commit, where they leave as StoreCommitUncertainError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.customers = CustomerUserRepository(self.session)
        self.sessions = CustomerSessionRepository(self.session)
        self.boards = BoardRepository(self.session)
        self.memberships = BoardMembershipRepository(self.session)
        self.invitations = BoardInvitationRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            await self.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.warning("Rollback failed: %s", rollback_exc)
        if exc is not None and _is_transient(exc):
            raise StoreUnavailableError(str(exc)) from exc
        return False

    async def commit(self):
        try:
            await asyncio.wait_for(
                self.session.commit(), timeout=ApplicationConfig.STORE_TIMEOUT_SECONDS
            )
        except Exception as exc:
            if _is_transient(exc):
                raise StoreCommitUncertainError(str(exc)) from exc
            raise

    async def rollback(self):
        await self.session.rollback()
