"""
BoardInvitation Entity

Single-use, time-bounded invitations to join a customer board.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import BoardRole, InvitationStatus


class BoardInvitation(SQLModel, table=True):
    """
    BoardInvitation entity - a redeemable grant of a board role.

    Business Rules:
    - Token is cryptographically random; only its SHA-256 hash is stored
    - pending while now < expires_at and accepted_at is null
    - accepted and expired are terminal
    - Redeemable exactly once; the record is kept after acceptance
    - Several pending invitations for the same (board, email) may coexist
    """

    __tablename__ = "board_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    board_id: UUID = Field(foreign_key="customer_boards.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: BoardRole = Field(nullable=False)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    invited_by: Optional[UUID] = Field(default=None, foreign_key="customer_users.id")
    accepted_by: Optional[UUID] = Field(default=None, foreign_key="customer_users.id")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_board_invitation_expires_at", "expires_at"),
        Index("idx_board_invitation_board_email", "board_id", "email"),
    )

    def status(self, now: datetime) -> InvitationStatus:
        if self.accepted_at is not None:
            return InvitationStatus.accepted
        if now >= self.expires_at:
            return InvitationStatus.expired
        return InvitationStatus.pending
