from abc import ABC, abstractmethod

from portal_access.app.repositories.audit_event_repository import IAuditEventRepository
from portal_access.app.repositories.board_invitation_repository import IBoardInvitationRepository
from portal_access.app.repositories.board_membership_repository import IBoardMembershipRepository
from portal_access.app.repositories.board_repository import IBoardRepository
from portal_access.app.repositories.customer_session_repository import ICustomerSessionRepository
from portal_access.app.repositories.customer_user_repository import ICustomerUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    customers: ICustomerUserRepository
    sessions: ICustomerSessionRepository
    boards: IBoardRepository
    memberships: IBoardMembershipRepository
    invitations: IBoardInvitationRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
