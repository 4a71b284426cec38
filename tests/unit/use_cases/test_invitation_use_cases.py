from datetime import timedelta
from uuid import uuid4

import pytest

from config import ApplicationConfig
from portal_access.app.services.credentials import hash_token
from portal_access.app.use_cases.invitations import (
    CreateInvitationUseCase,
    GetInvitationUseCase,
)
from portal_access.domain.entities import BoardInvitation, BoardRole, CustomerBoard


@pytest.fixture
def board():
    return CustomerBoard(id=uuid4(), organization="acme", slug="roadmap", name="Acme Roadmap")


@pytest.fixture
def invitation_uow(mock_uow, board):
    mock_uow.boards.get_by_id.return_value = board
    mock_uow.invitations.create.side_effect = lambda invitation: invitation
    return mock_uow


def make_invitation(board, now, **overrides):
    fields = dict(
        id=uuid4(),
        board_id=board.id,
        email="invitee@example.com",
        role=BoardRole.member,
        token_hash=hash_token("invite-token"),
        created_at=now - timedelta(days=1),
        expires_at=now + timedelta(days=6),
    )
    fields.update(overrides)
    return BoardInvitation(**fields)


@pytest.mark.asyncio
async def test_create_invitation_defaults(invitation_uow, board, clock, now):
    result = await CreateInvitationUseCase(invitation_uow, clock).execute(
        board.id, " Invitee@Example.com", "viewer"
    )

    assert result.is_ok()
    response = result.value
    assert response.email == "invitee@example.com"
    assert response.role == "viewer"
    assert response.invitation_url.endswith(f"/invitation/{response.token}")
    assert response.invitation_url.startswith(ApplicationConfig.PUBLIC_BASE_URL)
    assert response.expires_at == (
        now + timedelta(hours=ApplicationConfig.INVITATION_TTL_HOURS)
    ).isoformat()

    stored = invitation_uow.invitations.create.call_args.args[0]
    assert stored.token_hash == hash_token(response.token)
    assert stored.accepted_at is None
    assert invitation_uow.audit_events.create.call_args.args[0].action == "invitation_created"
    invitation_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_invitation_tokens_are_unique(invitation_uow, board, clock):
    use_case = CreateInvitationUseCase(invitation_uow, clock)

    first = await use_case.execute(board.id, "a@example.com", "member")
    second = await use_case.execute(board.id, "a@example.com", "member")

    assert first.value.token != second.value.token


@pytest.mark.asyncio
async def test_create_invitation_custom_ttl(invitation_uow, board, clock, now):
    result = await CreateInvitationUseCase(invitation_uow, clock).execute(
        board.id, "a@example.com", "admin", ttl=timedelta(hours=2)
    )

    assert result.value.expires_at == (now + timedelta(hours=2)).isoformat()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "role,ttl,code",
    [
        ("owner", None, "INVALID_ROLE"),
        ("member", timedelta(0), "INVALID_TTL"),
        ("member", timedelta(hours=-1), "INVALID_TTL"),
        ("member", timedelta(days=10_000), "INVALID_TTL"),
    ],
)
async def test_create_invitation_rejects_bad_input(invitation_uow, board, clock, role, ttl, code):
    result = await CreateInvitationUseCase(invitation_uow, clock).execute(
        board.id, "a@example.com", role, ttl=ttl
    )

    assert result.error.code == code
    invitation_uow.invitations.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_invitation_unknown_board(invitation_uow, clock):
    invitation_uow.boards.get_by_id.return_value = None

    result = await CreateInvitationUseCase(invitation_uow, clock).execute(
        uuid4(), "a@example.com", "member"
    )

    assert result.error.code == "BOARD_NOT_FOUND"
    invitation_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_pending_invitation(invitation_uow, board, now):
    invitation_uow.invitations.get_by_token_hash.return_value = make_invitation(board, now)

    result = await GetInvitationUseCase(invitation_uow, lambda: now).execute("invite-token")

    assert result.is_ok()
    assert result.value.status == "pending"
    assert result.value.board_name == "Acme Roadmap"
    invitation_uow.invitations.get_by_token_hash.assert_awaited_once_with(hash_token("invite-token"))


@pytest.mark.asyncio
async def test_get_invitation_at_expiry_instant_is_expired(invitation_uow, board, now):
    invitation_uow.invitations.get_by_token_hash.return_value = make_invitation(
        board, now, expires_at=now
    )

    result = await GetInvitationUseCase(invitation_uow, lambda: now).execute("invite-token")

    assert result.value.status == "expired"


@pytest.mark.asyncio
async def test_get_accepted_invitation_after_expiry_is_accepted(invitation_uow, board, now):
    invitation_uow.invitations.get_by_token_hash.return_value = make_invitation(
        board,
        now,
        expires_at=now - timedelta(days=1),
        accepted_at=now - timedelta(days=2),
    )

    result = await GetInvitationUseCase(invitation_uow, lambda: now).execute("invite-token")

    assert result.value.status == "accepted"
    assert result.value.accepted_at is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", "x" * 600, "unknown"])
async def test_get_invitation_not_found(invitation_uow, clock, token):
    invitation_uow.invitations.get_by_token_hash.return_value = None

    result = await GetInvitationUseCase(invitation_uow, clock).execute(token)

    assert result.error.code == "INVITATION_NOT_FOUND"
