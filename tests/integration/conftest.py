from datetime import timedelta
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from portal_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from portal_access.app.services.credentials import hash_token
from portal_access.depends import get_unit_of_work
from portal_access.domain.base import utcnow
from portal_access.domain.entities import (
    BoardInvitation,
    BoardMembership,
    BoardRole,
    CustomerBoard,
)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    from portal_access.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.fixture
def seed_board(db_session):
    """Boards belong to the board registry; tests insert them directly"""

    async def _seed(**overrides) -> CustomerBoard:
        fields = dict(organization="acme", slug="roadmap", name="Acme Roadmap")
        fields.update(overrides)
        board = CustomerBoard(**fields)
        db_session.add(board)
        await db_session.commit()
        return board

    return _seed


@pytest.fixture
def seed_invitation(db_session):
    """Insert an invitation with a known raw token"""

    async def _seed(board_id: UUID, token: str, role=BoardRole.member, expires_in=timedelta(days=7)):
        now = utcnow()
        invitation = BoardInvitation(
            board_id=board_id,
            email="invitee@example.com",
            role=role,
            token_hash=hash_token(token),
            created_at=now,
            expires_at=now + expires_in,
        )
        db_session.add(invitation)
        await db_session.commit()
        return invitation

    return _seed


@pytest.fixture
def seed_membership(db_session):
    async def _seed(board_id: UUID, customer_id: str, role: BoardRole) -> BoardMembership:
        membership = BoardMembership(board_id=board_id, customer_id=UUID(customer_id), role=role)
        db_session.add(membership)
        await db_session.commit()
        return membership

    return _seed


@pytest.fixture
def register(client):
    """Register a customer through the API; returns (token, user)"""

    async def _register(email: str, password: str = "hunter22", **profile):
        response = await client.post(
            "/customer-auth",
            json={"action": "register", "email": email, "password": password, **profile},
        )
        assert response.status_code == 200, response.text
        data = response.json()
        return data["token"], data["user"]

    return _register
