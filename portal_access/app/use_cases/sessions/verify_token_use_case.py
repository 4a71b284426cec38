from datetime import datetime
from typing import Callable, Optional

from portal_access.app.services.session_resolver import resolve_session
from portal_access.app.services.store_retry import store_retry
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.base import utcnow
from portal_access.libs.result import Error, Result, Return

from .dtos import CustomerProfile, VerifyTokenResponse


class VerifyTokenUseCase:
    """
    Who-am-I lookup for an opaque session token.

    Pure read: nothing is written, and "not logged in" is an INVALID_SESSION
    error value, never an exception.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    @store_retry
    async def execute(self, token: Optional[str]) -> Result[VerifyTokenResponse]:
        async with self.uow:
            authenticated = await resolve_session(self.uow, token, self.clock())

        if authenticated is None:
            return Return.err(Error("INVALID_SESSION", "Invalid or expired session"))

        expires_at = authenticated.session.expires_at
        return Return.ok(
            VerifyTokenResponse(
                valid=True,
                user=CustomerProfile.from_entity(authenticated.customer),
                expires_at=expires_at.isoformat() if expires_at else None,
            )
        )
