"""
Portal Access Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class BoardAccessType(str, Enum):
    """How a customer board is exposed"""

    public = "public"
    private = "private"
    invite_only = "invite_only"


class BoardRole(str, Enum):
    """Customer role within a board, ordered viewer < member < admin"""

    viewer = "viewer"
    member = "member"
    admin = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def at_least(self, other: "BoardRole") -> bool:
        return self.rank >= other.rank


_ROLE_RANK = {BoardRole.viewer: 0, BoardRole.member: 1, BoardRole.admin: 2}


class InvitationStatus(str, Enum):
    """Derived invitation lifecycle state"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"


class Capability(str, Enum):
    """Board operations gated by role"""

    view_board = "view_board"
    vote = "vote"
    create_feedback = "create_feedback"
    comment = "comment"
    view_members = "view_members"
    invite_members = "invite_members"
    remove_members = "remove_members"
    change_member_roles = "change_member_roles"
    manage_settings = "manage_settings"
    moderate_content = "moderate_content"
    toggle_board_activation = "toggle_board_activation"
