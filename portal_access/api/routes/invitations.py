from typing import Optional

from fastapi import APIRouter, Depends, status

from portal_access.api.error import raise_for_error
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    GetInvitationUseCase,
    InvitationDetails,
)
from portal_access.depends import get_session_token, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


@router.get("/{token}", status_code=status.HTTP_200_OK, response_model=InvitationDetails)
async def get_invitation(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Look up an invitation by its token, without consuming it.

    Expired and accepted invitations are still returned, with their status.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    result = await GetInvitationUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{token}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept an invitation as the signed-in customer.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED
        - 410 Gone: INVITATION_EXPIRED
        - 503 Service Unavailable: STORE_UNAVAILABLE
    """
    result = await AcceptInvitationUseCase(uow).execute(token, session_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
