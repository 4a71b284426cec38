"""
Portal Access Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    BoardAccessType,
    BoardRole,
    Capability,
    InvitationStatus,
)

# Export all entities
from .customer_user import CustomerUser
from .customer_session import CustomerSession
from .customer_board import CustomerBoard
from .board_membership import BoardMembership
from .board_invitation import BoardInvitation
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "BoardAccessType",
    "BoardRole",
    "Capability",
    "InvitationStatus",
    # Entities
    "CustomerUser",
    "CustomerSession",
    "CustomerBoard",
    "BoardMembership",
    "BoardInvitation",
    "AuditEvent",
]
