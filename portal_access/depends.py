from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from portal_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    pool_pre_ping=True,
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Routes decide themselves whether a missing token is an error
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """
    Extract the opaque customer session token from the Authorization header.

    Nothing is decoded here: the token carries no claims, and whether it is
    live is decided by the use cases against the session store.

    Returns:
        Raw bearer token, or None when the header is absent
    """
    if credentials is None:
        return None
    return credentials.credentials
