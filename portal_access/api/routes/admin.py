"""
Admin API Routes - Internal Invitation Issuance

For the back office that owns boards and onboards the first board admins.
Authentication is via Admin API Key, not customer sessions.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from portal_access.api.error import raise_for_error
from portal_access.api.routes.boards import CreateInvitationRequest
from portal_access.api.utils.admin_auth import verify_admin_api_key
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.invitations import (
    CreateInvitationUseCase,
    InvitationCreatedResponse,
)
from portal_access.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/boards/{board_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationCreatedResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def create_invitation(
    board_id: UUID,
    request: CreateInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Board Invitation

    Issues an invitation without a board admin session, e.g. for a board's
    very first admin.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_TTL
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: BOARD_NOT_FOUND
    """
    use_case = CreateInvitationUseCase(uow)
    result = await use_case.execute(
        board_id, request.email, request.role, ttl=request.ttl()
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
