"""
CustomerUser Entity

External (customer-facing) identity, distinct from product-team users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class CustomerUser(SQLModel, table=True):
    """
    CustomerUser entity - a person visiting customer boards.

    Business Rules:
    - Email is stored normalized (stripped, lower-case) and is unique
    - Password stored as bcrypt hash, only touched by credential helpers
    - Profile fields are optional and editable by the user's own session
    - id and email never change after signup
    """

    __tablename__ = "customer_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    company: Optional[str] = Field(default=None, max_length=255)
    job_title: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
