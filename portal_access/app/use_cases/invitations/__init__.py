"""
Board Invitation Use Cases

Issuing, looking up and redeeming board invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase, invitation_url
from .dtos import AcceptInvitationResponse, InvitationCreatedResponse, InvitationDetails
from .get_invitation_use_case import GetInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "invitation_url",
    "InvitationCreatedResponse",
    "InvitationDetails",
    "AcceptInvitationResponse",
]
