from datetime import datetime
from typing import Callable, Optional

from portal_access.app.services.session_resolver import resolve_session
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent
from portal_access.libs.result import Error, Result, Return

from .dtos import CustomerProfile, ProfileFields


class UpdateProfileUseCase:
    """
    Lets a customer edit their own profile fields.

    Only fields present in the command change. The identity is taken from the
    session, so one customer can never edit another's profile.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(
        self, token: Optional[str], fields: ProfileFields
    ) -> Result[CustomerProfile]:
        now = self.clock()
        async with self.uow:
            authenticated = await resolve_session(self.uow, token, now)
            if authenticated is None:
                return Return.err(Error("UNAUTHENTICATED", "Please sign in to continue"))

            customer = authenticated.customer
            changes = fields.model_dump(exclude_none=True)
            for name, value in changes.items():
                setattr(customer, name, value.strip())

            if changes:
                await self.uow.customers.update(customer)
                await self.uow.audit_events.create(
                    AuditEvent(
                        customer_id=customer.id,
                        action="profile_updated",
                        event_metadata={"fields": sorted(changes)},
                        created_at=now,
                    )
                )
                await self.uow.commit()

            return Return.ok(CustomerProfile.from_entity(customer))
