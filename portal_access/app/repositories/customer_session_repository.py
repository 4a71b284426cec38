from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from portal_access.domain.entities import CustomerSession


class ICustomerSessionRepository(ABC):
    """CustomerSession repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[CustomerSession]:
        """Get session by SHA-256 token hash (revoked and expired included)"""
        pass

    @abstractmethod
    async def create(self, session: CustomerSession) -> CustomerSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def revoke_by_token_hash(self, token_hash: str, revoked_at: datetime) -> bool:
        """Revoke one session. Returns True if a non-revoked session was revoked."""
        pass
