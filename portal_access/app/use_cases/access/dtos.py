"""
Access Gate DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from portal_access.domain.access_decision import AccessDecision
from portal_access.domain.capabilities import capabilities_for


class BoardAccessResponse(BaseModel):
    """Access decision as seen by the portal frontend"""

    outcome: str
    board_id: Optional[str] = None
    customer_id: Optional[str] = None
    role: Optional[str] = None
    anonymous: bool = False
    reason: Optional[str] = None
    capabilities: List[str] = []

    @classmethod
    def from_decision(cls, decision: AccessDecision) -> "BoardAccessResponse":
        capabilities = []
        if decision.allowed:
            capabilities = sorted(c.value for c in capabilities_for(decision.role))
        return cls(
            outcome=decision.outcome.value,
            board_id=str(decision.board_id) if decision.board_id else None,
            customer_id=str(decision.customer_id) if decision.customer_id else None,
            role=decision.role.value if decision.role else None,
            anonymous=decision.anonymous,
            reason=decision.reason.value if decision.reason else None,
            capabilities=capabilities,
        )
