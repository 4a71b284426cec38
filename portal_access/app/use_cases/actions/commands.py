"""
Customer auth action commands.

One model per action of the customer auth entry point, each carrying only
the fields that action needs. ``CustomerAuthAction`` is the union of all
of them; the ``action`` literal is the discriminator.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field


class RegisterAction(BaseModel):
    action: Literal["register"]
    email: EmailStr
    password: str
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    company: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)


class LoginAction(BaseModel):
    action: Literal["login"]
    email: str
    password: str


class LogoutAction(BaseModel):
    action: Literal["logout"]
    token: Optional[str] = None


class VerifyTokenAction(BaseModel):
    action: Literal["verify-token"]
    token: Optional[str] = None


class AcceptInvitationAction(BaseModel):
    action: Literal["accept-invitation"]
    token: Optional[str] = None
    invitation_token: str


CustomerAuthAction = Union[
    RegisterAction,
    LoginAction,
    LogoutAction,
    VerifyTokenAction,
    AcceptInvitationAction,
]
