"""User ORM — accounts for every role, from ADMIN to CUSTOMER.

Invariants:
    - email is unique and non-nullable
    - role is one of UserRole values
    - branch_id is NULL for ADMIN (manages all branches) and CUSTOMER
    - reset_token/reset_token_expires_at are set together and cleared together

Design Decisions:
    - Reset token stored on the user row: at most one outstanding reset per account
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sh_pizza.db.base import Base


class User(Base):
    """Account with a role that gates route access."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    branch_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("branches.id"), nullable=True,
    )
    reset_token: Mapped[str | None] = mapped_column(
        String(128), nullable=True, unique=True,
    )
    reset_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    branch: Mapped["Branch"] = relationship(
        "Branch", back_populates="users", lazy="selectin",
    )
