from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from portal_access.app.services.credentials import hash_token, is_well_formed_token
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.domain.entities import CustomerSession, CustomerUser


@dataclass(frozen=True)
class AuthenticatedCustomer:
    session: CustomerSession
    customer: CustomerUser


async def resolve_session(
    uow: UnitOfWork, token: Optional[str], now: datetime
) -> Optional[AuthenticatedCustomer]:
    """
    Look up the live session behind an opaque token.

    Read-only. Returns None for missing, malformed, unknown, revoked or
    expired tokens, and for sessions whose customer no longer exists.
    Must be called inside an entered unit of work.
    """
    if not is_well_formed_token(token):
        return None

    session = await uow.sessions.get_by_token_hash(hash_token(token.strip()))
    if session is None or not session.is_live(now):
        return None

    customer = await uow.customers.get_by_id(session.customer_id)
    if customer is None:
        return None

    return AuthenticatedCustomer(session=session, customer=customer)
