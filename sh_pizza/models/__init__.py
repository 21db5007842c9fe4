"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Primary keys are application-generated UUIDs

Design Decisions:
    - One file per table for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from sh_pizza.models.user import User  # noqa: F401
from sh_pizza.models.branch import Branch  # noqa: F401
from sh_pizza.models.pizza import Pizza  # noqa: F401
from sh_pizza.models.topping import Topping  # noqa: F401
from sh_pizza.models.pizza_topping import PizzaTopping  # noqa: F401
from sh_pizza.models.order import Order  # noqa: F401
from sh_pizza.models.order_item import OrderItem  # noqa: F401
from sh_pizza.models.order_item_topping import OrderItemTopping  # noqa: F401
from sh_pizza.models.offer import Offer  # noqa: F401
from sh_pizza.models.notification import Notification  # noqa: F401
