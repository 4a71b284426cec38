from datetime import timedelta

import bcrypt
import pytest

from config import ApplicationConfig
from portal_access.app.use_cases.sessions import ProfileFields, SignUpCommand, SignUpUseCase
from portal_access.app.services.credentials import hash_token
from portal_access.domain.errors import DuplicateRecordError


@pytest.fixture
def sign_up_uow(mock_uow):
    mock_uow.customers.create.side_effect = lambda customer: customer
    mock_uow.sessions.create.side_effect = lambda session: session
    return mock_uow


@pytest.mark.asyncio
async def test_sign_up_creates_customer_and_session(sign_up_uow, clock, now):
    command = SignUpCommand(
        email="  New.User@Example.COM ",
        password="hunter22",
        profile=ProfileFields(first_name="New", company="Acme"),
    )

    result = await SignUpUseCase(sign_up_uow, clock).execute(command)

    assert result.is_ok()
    response = result.value
    assert response.token
    assert response.user.email == "new.user@example.com"
    assert response.user.first_name == "New"
    assert response.user.last_name == ""
    assert response.user.company == "Acme"
    assert response.expires_at == (
        now + timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS)
    ).isoformat()

    created = sign_up_uow.customers.create.call_args.args[0]
    assert created.password_hash != "hunter22"
    assert bcrypt.checkpw(b"hunter22", created.password_hash.encode())

    # Only the token hash is stored
    session = sign_up_uow.sessions.create.call_args.args[0]
    assert session.token_hash == hash_token(response.token)
    assert session.customer_id == created.id

    audit = sign_up_uow.audit_events.create.call_args.args[0]
    assert audit.action == "customer_signup"
    sign_up_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_sign_up_rejects_short_password(sign_up_uow, clock):
    command = SignUpCommand(email="a@example.com", password="12345")

    result = await SignUpUseCase(sign_up_uow, clock).execute(command)

    assert result.is_err()
    assert result.error.code == "WEAK_CREDENTIAL"
    sign_up_uow.customers.create.assert_not_awaited()
    sign_up_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["p" * 100, "\u00e9" * 37])
async def test_sign_up_rejects_password_longer_than_72_bytes(sign_up_uow, clock, password):
    command = SignUpCommand(email="a@example.com", password=password)

    result = await SignUpUseCase(sign_up_uow, clock).execute(command)

    assert result.error.code == "WEAK_CREDENTIAL"
    sign_up_uow.customers.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_sign_up_duplicate_email(sign_up_uow, clock):
    sign_up_uow.customers.create.side_effect = DuplicateRecordError("taken")
    command = SignUpCommand(email="jane@example.com", password="hunter22")

    result = await SignUpUseCase(sign_up_uow, clock).execute(command)

    assert result.is_err()
    assert result.error.code == "DUPLICATE_EMAIL"
    sign_up_uow.sessions.create.assert_not_awaited()
    sign_up_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_sign_up_without_session_expiry(sign_up_uow, clock, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "SESSION_TTL_HOURS", 0)
    command = SignUpCommand(email="a@example.com", password="hunter22")

    result = await SignUpUseCase(sign_up_uow, clock).execute(command)

    assert result.is_ok()
    assert result.value.expires_at is None
    assert sign_up_uow.sessions.create.call_args.args[0].expires_at is None
