"""
Customer Auth Entry Point

Tagged-union actions and their dispatcher.
"""

from .commands import (
    AcceptInvitationAction,
    CustomerAuthAction,
    LoginAction,
    LogoutAction,
    RegisterAction,
    VerifyTokenAction,
)
from .customer_auth_dispatcher import CustomerAuthDispatcher, CustomerAuthResponse, ErrorBody

__all__ = [
    "CustomerAuthAction",
    "RegisterAction",
    "LoginAction",
    "LogoutAction",
    "VerifyTokenAction",
    "AcceptInvitationAction",
    "CustomerAuthDispatcher",
    "CustomerAuthResponse",
    "ErrorBody",
]
