"""PizzaTopping ORM — default toppings of a pizza (many-to-many link)."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sh_pizza.db.base import Base


class PizzaTopping(Base):
    __tablename__ = "pizza_toppings"

    pizza_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("pizzas.id", ondelete="CASCADE"), primary_key=True,
    )
    topping_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("toppings.id", ondelete="CASCADE"), primary_key=True,
    )
