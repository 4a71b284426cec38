import logging
from datetime import datetime
from typing import Callable

from config import ApplicationConfig
from portal_access.app.services.credentials import (
    MAX_PASSWORD_BYTES,
    hash_password,
    is_weak_password,
    normalize_email,
)
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.domain.entities import AuditEvent, CustomerUser
from portal_access.domain.errors import DuplicateRecordError
from portal_access.libs.result import Error, Result, Return

from .dtos import CustomerProfile, SessionResponse, SignUpCommand
from .session_issuer import issue_session

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """
    Customer Sign-Up

    Command/Response Pattern:
    - Input: SignUpCommand (validated business intent)
    - Output: Result[SessionResponse]

    Business Logic:
    1. Reject passwords shorter than MIN_PASSWORD_LENGTH or longer than
       MAX_PASSWORD_BYTES (WEAK_CREDENTIAL)
    2. Normalize the email and hash the password with bcrypt
    3. Insert the CustomerUser; the unique index on email is the only
       duplicate check, so concurrent sign-ups cannot both succeed
    4. Issue the initial session
    5. Record an audit event and commit everything at once
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, command: SignUpCommand) -> Result[SessionResponse]:
        if is_weak_password(command.password):
            return Return.err(
                Error(
                    "WEAK_CREDENTIAL",
                    f"Password must be at least {ApplicationConfig.MIN_PASSWORD_LENGTH} characters "
                    f"and at most {MAX_PASSWORD_BYTES} bytes long",
                )
            )

        email = normalize_email(command.email)
        now = self.clock()

        async with self.uow:
            customer = CustomerUser(
                email=email,
                password_hash=hash_password(command.password),
                first_name=command.profile.first_name,
                last_name=command.profile.last_name,
                company=command.profile.company,
                job_title=command.profile.job_title,
                created_at=now,
                last_login_at=now,
            )
            try:
                customer = await self.uow.customers.create(customer)
            except DuplicateRecordError:
                return Return.err(Error("DUPLICATE_EMAIL", "Email already registered"))

            token, session = await issue_session(self.uow, customer.id, now)

            await self.uow.audit_events.create(
                AuditEvent(
                    customer_id=customer.id,
                    action="customer_signup",
                    event_metadata={"session_id": str(session.id)},
                    created_at=now,
                )
            )

            await self.uow.commit()

            logger.info("Customer %s signed up", customer.id)

            return Return.ok(
                SessionResponse(
                    token=token,
                    user=CustomerProfile.from_entity(customer),
                    expires_at=session.expires_at.isoformat() if session.expires_at else None,
                )
            )
