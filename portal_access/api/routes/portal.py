from typing import Optional

from fastapi import APIRouter, Depends, status

from portal_access.api.error import raise_for_error
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.access import BoardAccessResponse, ResolveAccessUseCase
from portal_access.depends import get_session_token, get_unit_of_work
from portal_access.domain.access_decision import AccessOutcome
from portal_access.libs.result import Error

router = APIRouter(prefix="/portal", tags=["Portal"])


@router.get(
    "/{organization}/{board_slug}/access",
    status_code=status.HTTP_200_OK,
    response_model=BoardAccessResponse,
)
async def get_portal_board_access(
    organization: str,
    board_slug: str,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Access gate for a public portal URL (organization slug + board slug).

    Raises:
        - 404 Not Found: BOARD_NOT_FOUND
    """
    result = await ResolveAccessUseCase(uow).execute_by_slug(
        organization, board_slug, session_token
    )
    if result.is_err():
        raise_for_error(result.error)

    decision = result.value
    if decision.outcome == AccessOutcome.board_not_found:
        raise_for_error(Error("BOARD_NOT_FOUND", "Board not found"))

    return BoardAccessResponse.from_decision(decision)
