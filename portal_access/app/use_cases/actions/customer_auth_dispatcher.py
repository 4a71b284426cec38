"""
Customer Auth Dispatcher

Routes one CustomerAuthAction to its use case and shapes the uniform
``{token?, user?, ..., error?}`` response.
"""

from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel

from portal_access.app.services.unit_of_work import UnitOfWork
from portal_access.app.use_cases.invitations import AcceptInvitationUseCase
from portal_access.app.use_cases.sessions import (
    CustomerProfile,
    ProfileFields,
    SignInUseCase,
    SignOutUseCase,
    SignUpCommand,
    SignUpUseCase,
    VerifyTokenUseCase,
)
from portal_access.domain.base import utcnow
from portal_access.libs.result import Result, Return

from .commands import (
    AcceptInvitationAction,
    LoginAction,
    LogoutAction,
    RegisterAction,
    VerifyTokenAction,
)


class ErrorBody(BaseModel):
    code: str
    message: str


class CustomerAuthResponse(BaseModel):
    """Absence of ``error`` means the action succeeded"""

    token: Optional[str] = None
    user: Optional[CustomerProfile] = None
    expires_at: Optional[str] = None
    valid: Optional[bool] = None
    success: Optional[bool] = None
    board_id: Optional[str] = None
    role: Optional[str] = None
    error: Optional[ErrorBody] = None


class CustomerAuthDispatcher:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def dispatch(self, action) -> Result[CustomerAuthResponse]:
        if isinstance(action, RegisterAction):
            return await self._register(action)
        if isinstance(action, LoginAction):
            return await self._login(action)
        if isinstance(action, LogoutAction):
            return await self._logout(action)
        if isinstance(action, VerifyTokenAction):
            return await self._verify_token(action)
        if isinstance(action, AcceptInvitationAction):
            return await self._accept_invitation(action)
        raise TypeError(f"Unhandled customer auth action: {type(action).__name__}")

    async def _register(self, action: RegisterAction) -> Result[CustomerAuthResponse]:
        command = SignUpCommand(
            email=action.email,
            password=action.password,
            profile=ProfileFields(
                first_name=action.first_name,
                last_name=action.last_name,
                company=action.company,
                job_title=action.job_title,
            ),
        )
        result = await SignUpUseCase(self.uow, self.clock).execute(command)
        if result.is_err():
            return result
        session = result.value
        return Return.ok(
            CustomerAuthResponse(token=session.token, user=session.user, expires_at=session.expires_at)
        )

    async def _login(self, action: LoginAction) -> Result[CustomerAuthResponse]:
        result = await SignInUseCase(self.uow, self.clock).execute(action.email, action.password)
        if result.is_err():
            return result
        session = result.value
        return Return.ok(
            CustomerAuthResponse(token=session.token, user=session.user, expires_at=session.expires_at)
        )

    async def _logout(self, action: LogoutAction) -> Result[CustomerAuthResponse]:
        result = await SignOutUseCase(self.uow, self.clock).execute(action.token)
        if result.is_err():
            return result
        return Return.ok(CustomerAuthResponse(success=True))

    async def _verify_token(self, action: VerifyTokenAction) -> Result[CustomerAuthResponse]:
        result = await VerifyTokenUseCase(self.uow, self.clock).execute(action.token)
        if result.is_err():
            if result.error.code == "INVALID_SESSION":
                # Not being signed in is an answer, not a failure of the call
                return Return.ok(
                    CustomerAuthResponse(
                        valid=False,
                        error=ErrorBody(code=result.error.code, message=result.error.message),
                    )
                )
            return result
        verified = result.value
        return Return.ok(
            CustomerAuthResponse(valid=True, user=verified.user, expires_at=verified.expires_at)
        )

    async def _accept_invitation(self, action: AcceptInvitationAction) -> Result[CustomerAuthResponse]:
        result = await AcceptInvitationUseCase(self.uow, self.clock).execute(
            action.invitation_token, action.token
        )
        if result.is_err():
            return result
        accepted = result.value
        return Return.ok(
            CustomerAuthResponse(success=True, board_id=accepted.board_id, role=accepted.role)
        )
