"""
Customer Session Use Cases

Sign-up, sign-in, token verification, sign-out and profile updates.
"""

from .dtos import (
    CustomerProfile,
    ProfileFields,
    SessionResponse,
    SignOutResponse,
    SignUpCommand,
    VerifyTokenResponse,
)
from .sign_in_use_case import SignInUseCase
from .sign_out_use_case import SignOutUseCase
from .sign_up_use_case import SignUpUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .verify_token_use_case import VerifyTokenUseCase

__all__ = [
    # Use Cases
    "SignUpUseCase",
    "SignInUseCase",
    "VerifyTokenUseCase",
    "SignOutUseCase",
    "UpdateProfileUseCase",
    # DTOs - Commands
    "SignUpCommand",
    "ProfileFields",
    # DTOs - Responses
    "CustomerProfile",
    "SessionResponse",
    "VerifyTokenResponse",
    "SignOutResponse",
]
