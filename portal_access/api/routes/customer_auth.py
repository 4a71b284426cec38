from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from portal_access.api.error import raise_for_error
from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.actions import (
    CustomerAuthAction,
    CustomerAuthDispatcher,
    CustomerAuthResponse,
)
from portal_access.depends import get_unit_of_work

router = APIRouter(tags=["Customer Auth"])


@router.post(
    "/customer-auth",
    status_code=status.HTTP_200_OK,
    response_model=CustomerAuthResponse,
    response_model_exclude_none=True,
)
async def customer_auth(
    action: Annotated[CustomerAuthAction, Body(discriminator="action")],
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Customer auth entry point used by the portal frontend.

    The body selects one of: register, login, logout, verify-token,
    accept-invitation. Each action only accepts its own fields.

    Raises:
        - 400 Bad Request: WEAK_CREDENTIAL
        - 401 Unauthorized: INVALID_CREDENTIALS, UNAUTHENTICATED
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: DUPLICATE_EMAIL, INVITATION_ALREADY_ACCEPTED
        - 410 Gone: INVITATION_EXPIRED
        - 422 Unprocessable Entity: unknown action or invalid fields
        - 503 Service Unavailable: STORE_UNAVAILABLE
    """
    dispatcher = CustomerAuthDispatcher(uow)
    result = await dispatcher.dispatch(action)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
