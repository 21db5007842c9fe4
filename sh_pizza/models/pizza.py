"""Pizza ORM — a menu item sold by one branch.

Invariants:
    - (name, branch_id) is unique: two branches may sell the same pizza name
    - base_price is Numeric(10, 2), positive
    - Deleting a pizza deletes its pizza_toppings links (ORM and DB cascade)

Design Decisions:
    - topping_links loaded with selectin: menu listings always show topping ids
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean, DateTime, ForeignKey, Numeric, Text, UniqueConstraint, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sh_pizza.db.base import Base


class Pizza(Base):
    """Menu pizza, scoped to a branch."""
    __tablename__ = "pizzas"
    __table_args__ = (
        UniqueConstraint("name", "branch_id", name="uq_pizzas_name_branch"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    branch_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("branches.id"), nullable=True,
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
        "Branch", back_populates="pizzas", lazy="selectin",
    )
    topping_links: Mapped[list["PizzaTopping"]] = relationship(
        "PizzaTopping", cascade="all, delete-orphan", lazy="selectin",
    )

    @property
    def topping_ids(self) -> list[uuid.UUID]:
        return [link.topping_id for link in self.topping_links]

    @property
    def branch_name(self) -> str | None:
        return self.branch.name if self.branch else None
