from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from portal_access.app.services.credentials import hash_password, hash_token
from portal_access.domain.entities import CustomerSession, CustomerUser

SESSION_TOKEN = "live-session-token"


@pytest.fixture
def password():
    return "secret-pass"


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 12, 0, 0)


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Every repository method is awaitable
    uow.customers = AsyncMock()
    uow.sessions = AsyncMock()
    uow.boards = AsyncMock()
    uow.memberships = AsyncMock()
    uow.invitations = AsyncMock()
    uow.audit_events = AsyncMock()
    return uow


@pytest.fixture
def customer(now, password):
    return CustomerUser(
        id=uuid4(),
        email="jane@example.com",
        password_hash=hash_password(password),
        first_name="Jane",
        last_name="Doe",
        created_at=now - timedelta(days=10),
    )


@pytest.fixture
def customer_session(customer, now):
    return CustomerSession(
        id=uuid4(),
        customer_id=customer.id,
        token_hash=hash_token(SESSION_TOKEN),
        created_at=now - timedelta(hours=1),
        expires_at=now + timedelta(days=30),
    )


@pytest.fixture
def signed_in(mock_uow, customer, customer_session):
    """Wire the mock store so SESSION_TOKEN resolves to ``customer``"""
    mock_uow.sessions.get_by_token_hash.return_value = customer_session
    mock_uow.customers.get_by_id.return_value = customer
    return SESSION_TOKEN
