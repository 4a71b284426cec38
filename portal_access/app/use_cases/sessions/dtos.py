"""
Session Use Case DTOs (Data Transfer Objects)

Command and Response classes for the customer session domain.
"""

from typing import Optional

from pydantic import BaseModel

from portal_access.domain.entities import CustomerUser


# ============================================================================
# Command DTOs
# ============================================================================


class ProfileFields(BaseModel):
    """Optional customer profile fields; None means "not provided"."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    job_title: Optional[str] = None


class SignUpCommand(BaseModel):
    """Sign-up intent, created by the API layer after request validation"""

    email: str
    password: str
    profile: ProfileFields = ProfileFields()


# ============================================================================
# Response DTOs
# ============================================================================


class CustomerProfile(BaseModel):
    """
    Customer identity as returned to clients.

    Missing profile fields are rendered as empty strings here and nowhere else.
    """

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    job_title: str = ""

    @classmethod
    def from_entity(cls, customer: CustomerUser) -> "CustomerProfile":
        return cls(
            id=str(customer.id),
            email=customer.email,
            first_name=customer.first_name or "",
            last_name=customer.last_name or "",
            company=customer.company or "",
            job_title=customer.job_title or "",
        )


class SessionResponse(BaseModel):
    """Response for sign-up and sign-in: a usable token plus its identity"""

    token: str
    user: CustomerProfile
    expires_at: Optional[str] = None


class VerifyTokenResponse(BaseModel):
    """Response for token verification"""

    valid: bool
    user: CustomerProfile
    expires_at: Optional[str] = None


class SignOutResponse(BaseModel):
    """Response for sign-out (always success)"""

    success: bool = True
