"""
Role/Capability Model

Single source of truth for which board operations each role may perform.
Feature modules consult ``has_capability``; nothing re-derives these rules.
"""

from typing import FrozenSet, Optional

from .entities.enums import BoardRole, Capability

ANONYMOUS_CAPABILITIES: FrozenSet[Capability] = frozenset({Capability.view_board})

VIEWER_CAPABILITIES: FrozenSet[Capability] = ANONYMOUS_CAPABILITIES | {Capability.vote}

MEMBER_CAPABILITIES: FrozenSet[Capability] = VIEWER_CAPABILITIES | {
    Capability.create_feedback,
    Capability.comment,
    Capability.view_members,
}

ADMIN_CAPABILITIES: FrozenSet[Capability] = MEMBER_CAPABILITIES | {
    Capability.invite_members,
    Capability.remove_members,
    Capability.change_member_roles,
    Capability.manage_settings,
    Capability.moderate_content,
    Capability.toggle_board_activation,
}

CAPABILITY_TABLE = {
    BoardRole.viewer: VIEWER_CAPABILITIES,
    BoardRole.member: MEMBER_CAPABILITIES,
    BoardRole.admin: ADMIN_CAPABILITIES,
}


def capabilities_for(role: Optional[BoardRole]) -> FrozenSet[Capability]:
    """Capabilities of a role; ``None`` is an anonymous visitor of a public board."""
    if role is None:
        return ANONYMOUS_CAPABILITIES
    return CAPABILITY_TABLE[BoardRole(role)]


def has_capability(role: Optional[BoardRole], capability: Capability) -> bool:
    return Capability(capability) in capabilities_for(role)
