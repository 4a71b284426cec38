"""
BoardMembership Entity

Links a CustomerUser to a CustomerBoard with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import BoardRole


class BoardMembership(SQLModel, table=True):
    """
    BoardMembership entity - a customer's role on a board.

    Business Rules:
    - (board_id, customer_id) is unique
    - Created by invitation acceptance or by an administrative grant
    - Accepting a newer invitation overwrites the role explicitly
    """

    __tablename__ = "board_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    board_id: UUID = Field(foreign_key="customer_boards.id", nullable=False, index=True)
    customer_id: UUID = Field(foreign_key="customer_users.id", nullable=False, index=True)

    role: BoardRole = Field(nullable=False)
    invited_by_invitation_id: Optional[UUID] = Field(default=None, foreign_key="board_invitations.id")

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_board_membership_board_customer", "board_id", "customer_id", unique=True),
    )
