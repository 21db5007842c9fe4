"""Branch ORM — a physical store location.

Invariants:
    - name is unique across branches
    - delivery_zones is a JSON list of zone names (never NULL, default [])
    - is_active defaults to true; deactivation is the soft alternative to delete
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, JSON, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sh_pizza.db.base import Base


class Branch(Base):
    """Store location owning pizzas, staff and orders."""
    __tablename__ = "branches"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    delivery_zones: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
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

    users: Mapped[list["User"]] = relationship(
        "User", back_populates="branch", passive_deletes=True,
    )
    pizzas: Mapped[list["Pizza"]] = relationship(
        "Pizza", back_populates="branch", passive_deletes=True,
    )
