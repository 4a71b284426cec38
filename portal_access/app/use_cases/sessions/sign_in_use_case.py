"""
Sign-In Use Case

Authenticates a customer and issues a new opaque session token.
"""

import logging
from datetime import datetime
from typing import Callable

from portal_access.app.services.credentials import normalize_email, verify_password
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent
from portal_access.libs.result import Error, Result, Return

from .dtos import CustomerProfile, SessionResponse
from .session_issuer import issue_session

logger = logging.getLogger(__name__)


class SignInUseCase:
    """
    Use case for customer sign-in.

    Business Rules:
    - Unknown email and wrong password return the same INVALID_CREDENTIALS
      error, and both paths run a bcrypt comparison
    - Every successful sign-in creates a new session; existing sessions of
      the same customer stay valid (multi-device)
    - Updates customer.last_login_at
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, email: str, password: str) -> Result[SessionResponse]:
        async with self.uow:
            customer = await self.uow.customers.get_by_email(normalize_email(email))

            password_valid = verify_password(
                password or "", customer.password_hash if customer else None
            )
            if customer is None or not password_valid:
                logger.warning("Rejected customer sign-in")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            now = self.clock()
            token, session = await issue_session(self.uow, customer.id, now)

            customer.last_login_at = now
            await self.uow.customers.update(customer)

            await self.uow.audit_events.create(
                AuditEvent(
                    customer_id=customer.id,
                    action="customer_login",
                    event_metadata={"session_id": str(session.id)},
                    created_at=now,
                )
            )

            await self.uow.commit()

            return Return.ok(
                SessionResponse(
                    token=token,
                    user=CustomerProfile.from_entity(customer),
                    expires_at=session.expires_at.isoformat() if session.expires_at else None,
                )
            )
