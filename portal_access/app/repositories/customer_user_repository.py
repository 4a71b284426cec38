from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from portal_access.domain.entities import CustomerUser


class ICustomerUserRepository(ABC):
    """CustomerUser repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[CustomerUser]:
        """Get customer by normalized email address"""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: UUID) -> Optional[CustomerUser]:
        """Get customer by ID"""
        pass

    @abstractmethod
    async def create(self, customer: CustomerUser) -> CustomerUser:
        """
        Create a new customer.

        Raises:
            DuplicateRecordError: email already registered (unique constraint)
        """
        pass

    @abstractmethod
    async def update(self, customer: CustomerUser) -> CustomerUser:
        """Update existing customer"""
        pass
