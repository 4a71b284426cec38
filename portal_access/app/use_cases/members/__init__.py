"""
Board Member Management Use Cases

Consumers of the access gate and the capability table.
"""

from .change_member_role_use_case import ChangeMemberRoleUseCase
from .dtos import (
    BoardMemberInfo,
    BoardMembersResponse,
    ChangeMemberRoleResponse,
    RemoveMemberResponse,
)
from .list_board_members_use_case import ListBoardMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase

__all__ = [
    "ListBoardMembersUseCase",
    "ChangeMemberRoleUseCase",
    "RemoveMemberUseCase",
    "BoardMemberInfo",
    "BoardMembersResponse",
    "ChangeMemberRoleResponse",
    "RemoveMemberResponse",
]
