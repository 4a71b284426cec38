from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal_access.domain.entities import CustomerBoard


class IBoardRepository(ABC):
    """Board registry interface - read-only to this service"""

    @abstractmethod
    async def get_by_id(self, board_id: UUID) -> Optional[CustomerBoard]:
        """Get board by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, organization: str, slug: str) -> Optional[CustomerBoard]:
        """Get board by organization slug and board slug"""
        pass
