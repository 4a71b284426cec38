import pytest
from httpx import AsyncClient

from portal_access.domain.entities import BoardRole


@pytest.fixture
def board_with_admin(seed_board, seed_membership, register):
    async def _setup(**board_fields):
        board = await seed_board(**board_fields)
        token, user = await register("admin@example.com")
        await seed_membership(board.id, user["id"], BoardRole.admin)
        return board, {"Authorization": f"Bearer {token}"}, user

    return _setup


@pytest.mark.asyncio
async def test_admin_invites_and_lists_members(client: AsyncClient, board_with_admin, register):
    board, admin_headers, admin = await board_with_admin(is_public=False)

    invite = await client.post(
        f"/boards/{board.id}/invitations",
        json={"email": "member@example.com", "role": "member"},
        headers=admin_headers,
    )
    assert invite.status_code == 201

    token, member = await register("member@example.com")
    member_headers = {"Authorization": f"Bearer {token}"}
    await client.post(f"/invitations/{invite.json()['token']}/accept", headers=member_headers)

    response = await client.get(f"/boards/{board.id}/members", headers=member_headers)

    assert response.status_code == 200
    members = response.json()["members"]
    assert [m["customer_id"] for m in members] == [admin["id"], member["id"]]
    assert [m["role"] for m in members] == ["admin", "member"]


@pytest.mark.asyncio
async def test_member_cannot_invite(client: AsyncClient, seed_board, seed_membership, register):
    board = await seed_board()
    token, user = await register("member@example.com")
    await seed_membership(board.id, user["id"], BoardRole.member)

    response = await client.post(
        f"/boards/{board.id}/invitations",
        json={"email": "friend@example.com"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_members_require_sign_in(client: AsyncClient, seed_board):
    board = await seed_board(is_public=False)

    response = await client.get(f"/boards/{board.id}/members")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_anonymous_cannot_list_public_board_members(client: AsyncClient, seed_board):
    board = await seed_board()

    response = await client.get(f"/boards/{board.id}/members")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_change_member_role(client: AsyncClient, board_with_admin, seed_membership, register):
    board, admin_headers, admin = await board_with_admin()
    _, member = await register("member@example.com")
    await seed_membership(board.id, member["id"], BoardRole.viewer)

    response = await client.patch(
        f"/boards/{board.id}/members/{member['id']}",
        json={"role": "member"},
        headers=admin_headers,
    )
    own = await client.patch(
        f"/boards/{board.id}/members/{admin['id']}",
        json={"role": "viewer"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["previous_role"] == "viewer"
    assert response.json()["role"] == "member"
    assert own.status_code == 400
    assert own.json()["error"]["code"] == "CANNOT_CHANGE_OWN_ROLE"


@pytest.mark.asyncio
async def test_remove_member(client: AsyncClient, board_with_admin, seed_membership, register):
    board, admin_headers, admin = await board_with_admin(is_public=False)
    member_token, member = await register("member@example.com")
    await seed_membership(board.id, member["id"], BoardRole.member)

    response = await client.delete(
        f"/boards/{board.id}/members/{member['id']}", headers=admin_headers
    )
    again = await client.delete(
        f"/boards/{board.id}/members/{member['id']}", headers=admin_headers
    )
    access = await client.get(
        f"/boards/{board.id}/access", headers={"Authorization": f"Bearer {member_token}"}
    )

    assert response.status_code == 200
    assert again.status_code == 404
    assert access.json()["reason"] == "not_a_member"


@pytest.mark.asyncio
async def test_cannot_remove_last_admin(
    client: AsyncClient, board_with_admin, seed_membership, register
):
    board, admin_headers, admin = await board_with_admin()
    other_token, other = await register("other-admin@example.com")
    await seed_membership(board.id, other["id"], BoardRole.admin)

    first = await client.delete(f"/boards/{board.id}/members/{admin['id']}", headers=admin_headers)
    last = await client.delete(
        f"/boards/{board.id}/members/{other['id']}",
        headers={"Authorization": f"Bearer {other_token}"},
    )

    assert first.status_code == 200
    assert last.status_code == 409
    assert last.json()["error"]["code"] == "CANNOT_REMOVE_LAST_ADMIN"
