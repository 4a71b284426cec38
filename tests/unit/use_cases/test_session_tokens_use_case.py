from datetime import timedelta

import pytest

from portal_access.app.services.credentials import hash_token
from portal_access.app.use_cases.sessions import (
    ProfileFields,
    SignOutUseCase,
    UpdateProfileUseCase,
    VerifyTokenUseCase,
)


@pytest.mark.asyncio
async def test_verify_live_token(mock_uow, signed_in, customer, clock):
    result = await VerifyTokenUseCase(mock_uow, clock).execute(signed_in)

    assert result.is_ok()
    assert result.value.valid is True
    assert result.value.user.email == customer.email
    mock_uow.sessions.get_by_token_hash.assert_awaited_once_with(hash_token(signed_in))


@pytest.mark.asyncio
async def test_verify_token_expires_exactly_at_expires_at(
    mock_uow, signed_in, customer_session, now
):
    customer_session.expires_at = now

    result = await VerifyTokenUseCase(mock_uow, lambda: now).execute(signed_in)

    assert result.is_err()
    assert result.error.code == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_verify_token_one_second_before_expiry(
    mock_uow, signed_in, customer_session, now
):
    customer_session.expires_at = now + timedelta(seconds=1)

    result = await VerifyTokenUseCase(mock_uow, lambda: now).execute(signed_in)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_verify_revoked_token(mock_uow, signed_in, customer_session, clock):
    customer_session.revoked = True

    result = await VerifyTokenUseCase(mock_uow, clock).execute(signed_in)

    assert result.error.code == "INVALID_SESSION"


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "   ", "x" * 513])
async def test_verify_malformed_token_skips_store(mock_uow, clock, token):
    result = await VerifyTokenUseCase(mock_uow, clock).execute(token)

    assert result.error.code == "INVALID_SESSION"
    mock_uow.sessions.get_by_token_hash.assert_not_awaited()


@pytest.mark.asyncio
async def test_sign_out_revokes_presented_session(mock_uow, signed_in, customer_session, clock, now):
    mock_uow.sessions.revoke_by_token_hash.return_value = True

    result = await SignOutUseCase(mock_uow, clock).execute(signed_in)

    assert result.is_ok()
    assert result.value.success is True
    mock_uow.sessions.revoke_by_token_hash.assert_awaited_once_with(hash_token(signed_in), now)
    assert mock_uow.audit_events.create.call_args.args[0].action == "customer_logout"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_sign_out_twice_is_still_success(mock_uow, signed_in, clock):
    mock_uow.sessions.revoke_by_token_hash.return_value = False

    result = await SignOutUseCase(mock_uow, clock).execute(signed_in)

    assert result.is_ok()
    mock_uow.audit_events.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "unknown-token"])
async def test_sign_out_unknown_token_is_success(mock_uow, clock, token):
    mock_uow.sessions.get_by_token_hash.return_value = None

    result = await SignOutUseCase(mock_uow, clock).execute(token)

    assert result.is_ok()
    mock_uow.sessions.revoke_by_token_hash.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_profile_changes_only_given_fields(mock_uow, signed_in, customer, clock):
    mock_uow.customers.update.side_effect = lambda c: c

    result = await UpdateProfileUseCase(mock_uow, clock).execute(
        signed_in, ProfileFields(company="  Initech ")
    )

    assert result.is_ok()
    assert result.value.company == "Initech"
    assert result.value.first_name == "Jane"
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.event_metadata == {"fields": ["company"]}
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_profile_requires_session(mock_uow, clock):
    mock_uow.sessions.get_by_token_hash.return_value = None

    result = await UpdateProfileUseCase(mock_uow, clock).execute(
        "stale-token", ProfileFields(first_name="X")
    )

    assert result.error.code == "UNAUTHENTICATED"
    mock_uow.customers.update.assert_not_awaited()
