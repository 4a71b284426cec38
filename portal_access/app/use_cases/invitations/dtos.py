"""
Invitation Use Case DTOs (Data Transfer Objects)

All Response classes for the board invitation domain.
"""

from typing import Optional

from pydantic import BaseModel


class InvitationCreatedResponse(BaseModel):
    """Response for create invitation; the only place the raw token appears"""

    invitation_id: str
    board_id: str
    email: str
    role: str
    token: str
    invitation_url: str
    expires_at: str


class InvitationDetails(BaseModel):
    """Public view of an invitation, looked up by its token"""

    id: str
    board_id: str
    board_name: str
    email: str
    role: str
    status: str
    expires_at: str
    accepted_at: Optional[str] = None


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation: the resulting membership"""

    board_id: str
    membership_id: str
    role: str
    previous_role: Optional[str] = None
