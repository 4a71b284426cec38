from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from portal_access.api.error import raise_for_error
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.access import BoardAccessResponse, ResolveAccessUseCase
from portal_access.app.use_cases.invitations import (
    CreateInvitationUseCase,
    InvitationCreatedResponse,
)
from portal_access.app.use_cases.members import (
    BoardMembersResponse,
    ChangeMemberRoleResponse,
    ChangeMemberRoleUseCase,
    ListBoardMembersUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)
from portal_access.depends import get_session_token, get_unit_of_work
from portal_access.domain.access_decision import (
    AccessDecision,
    AccessDenialReason,
    AccessOutcome,
)
from portal_access.domain.entities import Capability
from portal_access.libs.result import Error

router = APIRouter(prefix="/boards", tags=["Boards"])

BOARD_NOT_FOUND = Error("BOARD_NOT_FOUND", "Board not found")


async def resolve_decision(
    uow: UnitOfWork, board_id: UUID, session_token: Optional[str]
) -> AccessDecision:
    """
    Run the access gate for a board-scoped operation.

    Raises:
        ClientError: 404 for unknown boards, 401 when no live session is
            presented for a restricted board
    """
    result = await ResolveAccessUseCase(uow).execute(board_id, session_token)
    if result.is_err():
        raise_for_error(result.error)

    decision = result.value
    if decision.outcome == AccessOutcome.board_not_found:
        raise_for_error(BOARD_NOT_FOUND)
    if decision.reason == AccessDenialReason.not_signed_in:
        raise_for_error(Error("UNAUTHENTICATED", "Please sign in to continue"))
    return decision


@router.get(
    "/{board_id}/access",
    status_code=status.HTTP_200_OK,
    response_model=BoardAccessResponse,
)
async def get_board_access(
    board_id: UUID,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Access gate by board id.

    Denials are answers, not errors: the body says whether to show the board,
    a sign-in prompt (not_signed_in) or an access-denied page (not_a_member).

    Raises:
        - 404 Not Found: BOARD_NOT_FOUND (missing or deactivated board)
    """
    result = await ResolveAccessUseCase(uow).execute(board_id, session_token)
    if result.is_err():
        raise_for_error(result.error)

    decision = result.value
    if decision.outcome == AccessOutcome.board_not_found:
        raise_for_error(BOARD_NOT_FOUND)

    return BoardAccessResponse.from_decision(decision)


class CreateInvitationRequest(BaseModel):
    """Invitation issuance payload, shared by board admins and the admin API"""

    email: EmailStr = Field(..., description="Invitee email address")
    role: str = Field("member", description="Role granted on acceptance")
    expires_in_hours: Optional[int] = Field(
        None,
        le=ApplicationConfig.INVITATION_MAX_TTL_HOURS,
        description="Invitation lifetime, defaults to INVITATION_TTL_HOURS",
    )

    def ttl(self) -> Optional[timedelta]:
        if self.expires_in_hours is None:
            return None
        return timedelta(hours=self.expires_in_hours)


@router.post(
    "/{board_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationCreatedResponse,
)
async def create_board_invitation(
    board_id: UUID,
    request: CreateInvitationRequest,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite an email address to a board, as one of its admins.

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_TTL
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BOARD_NOT_FOUND
    """
    decision = await resolve_decision(uow, board_id, session_token)
    if not decision.can(Capability.invite_members):
        raise_for_error(Error("INSUFFICIENT_ROLE", "Only board admins can invite members"))

    result = await CreateInvitationUseCase(uow).execute(
        board_id,
        request.email,
        request.role,
        ttl=request.ttl(),
        invited_by=decision.customer_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{board_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=BoardMembersResponse,
)
async def list_board_members(
    board_id: UUID,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List board members.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BOARD_NOT_FOUND
    """
    decision = await resolve_decision(uow, board_id, session_token)

    result = await ListBoardMembersUseCase(uow).execute(decision, board_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangeMemberRoleRequest(BaseModel):
    role: str = Field(..., description="New role (admin, member, viewer)")


@router.patch(
    "/{board_id}/members/{customer_id}",
    status_code=status.HTTP_200_OK,
    response_model=ChangeMemberRoleResponse,
)
async def change_member_role(
    board_id: UUID,
    customer_id: UUID,
    request: ChangeMemberRoleRequest,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a member's role.

    Raises:
        - 400 Bad Request: INVALID_ROLE, CANNOT_CHANGE_OWN_ROLE
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BOARD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    decision = await resolve_decision(uow, board_id, session_token)

    result = await ChangeMemberRoleUseCase(uow).execute(
        decision, board_id, customer_id, request.role
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{board_id}/members/{customer_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    board_id: UUID,
    customer_id: UUID,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove a member from a board.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BOARD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
        - 409 Conflict: CANNOT_REMOVE_LAST_ADMIN
    """
    decision = await resolve_decision(uow, board_id, session_token)

    result = await RemoveMemberUseCase(uow).execute(decision, board_id, customer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
