from datetime import datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from config import ApplicationConfig
from portal_access.app.services.credentials import generate_token, hash_token
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.entities import CustomerSession


def session_expiry(now: datetime) -> Optional[datetime]:
    if ApplicationConfig.SESSION_TTL_HOURS <= 0:
        return None
    return now + timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)


async def issue_session(
    uow: UnitOfWork, customer_id: UUID, now: datetime
) -> Tuple[str, CustomerSession]:
    """Create a session row and return the raw token (shown to the client once)."""
    token = generate_token()
    session = CustomerSession(
        customer_id=customer_id,
        token_hash=hash_token(token),
        created_at=now,
        expires_at=session_expiry(now),
    )
    session = await uow.sessions.create(session)
    return token, session
