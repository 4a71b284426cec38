from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from portal_access.api.error import raise_for_error
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.sessions import (
    CustomerProfile,
    ProfileFields,
    UpdateProfileUseCase,
    VerifyTokenResponse,
    VerifyTokenUseCase,
)
from portal_access.depends import get_session_token, get_unit_of_work

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=VerifyTokenResponse)
async def get_me(
    token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Who am I - resolves the bearer session to its customer.

    Raises:
        - 401 Unauthorized: INVALID_SESSION
    """
    result = await VerifyTokenUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateProfileRequest(BaseModel):
    """Only the fields present in the body are changed"""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    company: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)


@router.patch("/me", status_code=status.HTTP_200_OK, response_model=CustomerProfile)
async def update_me(
    request: UpdateProfileRequest,
    token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update the signed-in customer's profile fields.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
    """
    fields = ProfileFields(**request.model_dump(exclude_none=True))
    result = await UpdateProfileUseCase(uow).execute(token, fields)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
