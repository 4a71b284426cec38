"""
AuditEvent Entity

Immutable log of customer authentication and board access events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from ..base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of security-relevant actions.

    Business Rules:
    - Immutable (never updated or deleted)
    - Written in the same transaction as the action it records
    - board_id nullable for board-independent events (signup, login)
    - Metadata never contains tokens, passwords or hashes
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    board_id: Optional[UUID] = Field(default=None, index=True)
    customer_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "customer_login", "invitation_accepted"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_board_action", "board_id", "action"),
    )
