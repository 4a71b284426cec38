from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from portal_access.domain.entities import BoardInvitation


class IBoardInvitationRepository(ABC):
    """BoardInvitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[BoardInvitation]:
        """Get invitation by SHA-256 token hash"""
        pass

    @abstractmethod
    async def create(self, invitation: BoardInvitation) -> BoardInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_accepted(
        self, invitation_id: UUID, customer_id: UUID, accepted_at: datetime
    ) -> bool:
        """
        Atomically consume a pending invitation.

        Sets accepted_at/accepted_by only when accepted_at is still null and
        the invitation has not expired at accepted_at. Returns True for the
        single caller whose write took effect.
        """
        pass
