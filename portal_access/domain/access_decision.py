"""
AccessDecision

Outcome of the access gate for one (board, session) pair on one request.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from .capabilities import has_capability
from .entities.enums import BoardRole, Capability


class AccessOutcome(str, Enum):
    allowed = "allowed"
    requires_authentication = "requires_authentication"
    board_not_found = "board_not_found"


class AccessDenialReason(str, Enum):
    """Why a restricted board was not opened; lets callers pick the message"""

    not_signed_in = "not_signed_in"
    not_a_member = "not_a_member"


class AccessDecision(BaseModel):
    outcome: AccessOutcome
    board_id: Optional[UUID] = None
    customer_id: Optional[UUID] = None
    role: Optional[BoardRole] = None
    anonymous: bool = False
    reason: Optional[AccessDenialReason] = None

    @property
    def allowed(self) -> bool:
        return self.outcome == AccessOutcome.allowed

    def can(self, capability: Capability) -> bool:
        if not self.allowed:
            return False
        return has_capability(self.role, capability)

    @classmethod
    def allow_member(cls, board_id: UUID, customer_id: UUID, role: BoardRole) -> "AccessDecision":
        return cls(
            outcome=AccessOutcome.allowed,
            board_id=board_id,
            customer_id=customer_id,
            role=role,
        )

    @classmethod
    def allow_anonymous(cls, board_id: UUID, customer_id: Optional[UUID] = None) -> "AccessDecision":
        return cls(
            outcome=AccessOutcome.allowed,
            board_id=board_id,
            customer_id=customer_id,
            anonymous=True,
        )

    @classmethod
    def requires_authentication(
        cls,
        board_id: UUID,
        reason: AccessDenialReason,
        customer_id: Optional[UUID] = None,
    ) -> "AccessDecision":
        return cls(
            outcome=AccessOutcome.requires_authentication,
            board_id=board_id,
            customer_id=customer_id,
            reason=reason,
        )

    @classmethod
    def board_not_found(cls) -> "AccessDecision":
        return cls(outcome=AccessOutcome.board_not_found)
