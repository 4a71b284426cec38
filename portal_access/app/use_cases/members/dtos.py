"""
Board Member Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel


class BoardMemberInfo(BaseModel):
    """One member of a board"""

    customer_id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: str
    joined_at: str


class BoardMembersResponse(BaseModel):
    """Response for list board members"""

    board_id: str
    members: List[BoardMemberInfo]


class ChangeMemberRoleResponse(BaseModel):
    """Response for change member role"""

    status: str
    customer_id: str
    role: str
    previous_role: Optional[str] = None


class RemoveMemberResponse(BaseModel):
    """Response for remove member"""

    status: str
