"""
CustomerBoard Entity

Board configuration owned by the board registry. Read-only to this service.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import BoardAccessType


class CustomerBoard(SQLModel, table=True):
    """
    CustomerBoard entity - a customer-facing feedback board.

    Business Rules:
    - (organization, slug) identifies a board in portal URLs
    - A board is open to anonymous visitors only when is_public is set
      and access_type is public; every other combination requires membership
    - Inactive boards are hidden from the portal
    """

    __tablename__ = "customer_boards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization: str = Field(max_length=100, index=True)
    slug: str = Field(max_length=100)
    name: str = Field(max_length=255)
    description: Optional[str] = None

    is_public: bool = Field(default=True)
    access_type: BoardAccessType = Field(default=BoardAccessType.public)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_customer_board_org_slug", "organization", "slug", unique=True),
    )

    @property
    def requires_membership(self) -> bool:
        return not (self.is_public and self.access_type == BoardAccessType.public)
