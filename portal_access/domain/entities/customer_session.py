"""
CustomerSession Entity

Opaque bearer sessions issued to customer users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class CustomerSession(SQLModel, table=True):
    """
    CustomerSession entity - one authenticated period of a customer user.

    Business Rules:
    - Raw token is returned once; only its SHA-256 hash is stored
    - A user may hold any number of live sessions (multi-device)
    - Sign-out revokes exactly the presented session
    - expires_at is optional; None means the session never expires
    """

    __tablename__ = "customer_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    customer_id: UUID = Field(foreign_key="customer_users.id", nullable=False, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_customer_session_customer_revoked", "customer_id", "revoked"),)

    def is_live(self, now: datetime) -> bool:
        if self.revoked:
            return False
        return self.expires_at is None or now < self.expires_at
