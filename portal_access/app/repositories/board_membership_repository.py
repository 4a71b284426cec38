from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from portal_access.domain.entities import BoardMembership


class IBoardMembershipRepository(ABC):
    """BoardMembership repository interface - application layer"""

    @abstractmethod
    async def get_by_board_and_customer(
        self, board_id: UUID, customer_id: UUID
    ) -> Optional[BoardMembership]:
        """Get membership by board and customer"""
        pass

    @abstractmethod
    async def get_by_board_id(self, board_id: UUID) -> List[BoardMembership]:
        """Get all memberships of a board"""
        pass

    @abstractmethod
    async def create(self, membership: BoardMembership) -> BoardMembership:
        """
        Create a new membership.

        Raises:
            DuplicateRecordError: (board_id, customer_id) already present
        """
        pass

    @abstractmethod
    async def update(self, membership: BoardMembership) -> BoardMembership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: BoardMembership) -> None:
        """Delete a membership"""
        pass
