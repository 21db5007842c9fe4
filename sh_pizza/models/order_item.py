"""OrderItem ORM — one pizza line (with quantity and customizations) of an order."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, JSON, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sh_pizza.db.base import Base


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False,
    )
    pizza_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("pizzas.id"), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    customizations: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    toppings: Mapped[list["OrderItemTopping"]] = relationship(
        "OrderItemTopping", cascade="all, delete-orphan",
    )
