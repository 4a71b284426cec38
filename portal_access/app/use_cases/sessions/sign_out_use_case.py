from datetime import datetime
from typing import Callable, Optional

from portal_access.app.services.credentials import hash_token, is_well_formed_token
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent
from portal_access.libs.result import Result, Return

from .dtos import SignOutResponse


class SignOutUseCase:
    """
    Revokes exactly the presented session.

    Idempotent: unknown, malformed or already revoked tokens succeed too.
    Other sessions of the same customer are left alone.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, token: Optional[str]) -> Result[SignOutResponse]:
        if not is_well_formed_token(token):
            return Return.ok(SignOutResponse())

        token_hash = hash_token(token.strip())
        now = self.clock()

        async with self.uow:
            session = await self.uow.sessions.get_by_token_hash(token_hash)
            if session is None:
                return Return.ok(SignOutResponse())

            revoked = await self.uow.sessions.revoke_by_token_hash(token_hash, now)
            if revoked:
                await self.uow.audit_events.create(
                    AuditEvent(
                        customer_id=session.customer_id,
                        action="customer_logout",
                        event_metadata={"session_id": str(session.id)},
                        created_at=now,
                    )
                )
                await self.uow.commit()

        return Return.ok(SignOutResponse())
