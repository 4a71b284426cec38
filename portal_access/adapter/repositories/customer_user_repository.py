from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from portal_access.app.repositories.customer_user_repository import ICustomerUserRepository
from portal_access.domain.entities import CustomerUser
from portal_access.domain.errors import DuplicateRecordError


class CustomerUserRepository(ICustomerUserRepository):
    """CustomerUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[CustomerUser]:
        """Get customer by normalized email address"""
        stmt = select(CustomerUser).where(CustomerUser.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, customer_id: UUID) -> Optional[CustomerUser]:
        """Get customer by ID"""
        stmt = select(CustomerUser).where(CustomerUser.id == customer_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, customer: CustomerUser) -> CustomerUser:
        """Create a new customer, relying on the unique email index"""
        self.session.add(customer)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError("customer email already registered") from exc
        await self.session.refresh(customer)
        return customer

    async def update(self, customer: CustomerUser) -> CustomerUser:
        """Update existing customer"""
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer
