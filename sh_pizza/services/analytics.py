"""Analytics Service — fetches order rows and hands them to core/analytics.

Invariants:
    - Only the columns OrderRow needs are selected
    - Branch and customer lookups are batched (one IN query each)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.analytics import (
    RECENT_ORDER_LIMIT, OrderRow, build_report, history_start,
)
from sh_pizza.core.clock import utcnow
from sh_pizza.models import Branch, Order, User

logger = logging.getLogger(__name__)

_ORDER_COLUMNS = (
    Order.id, Order.customer_id, Order.branch_id,
    Order.status, Order.total_amount, Order.created_at,
)


def _to_rows(result) -> list[OrderRow]:
    return [OrderRow(*row) for row in result.all()]


async def build_analytics(db: AsyncSession, days: int) -> dict:
    """Window metrics over the last `days` days plus six months of revenue."""
    now = utcnow()
    history = _to_rows(await db.execute(
        select(*_ORDER_COLUMNS).where(Order.created_at >= history_start(now, days)),
    ))
    latest = _to_rows(await db.execute(
        select(*_ORDER_COLUMNS)
        .order_by(Order.created_at.desc())
        .limit(RECENT_ORDER_LIMIT),
    ))

    branch_ids = {r.branch_id for r in history if r.branch_id is not None}
    branch_names = {}
    if branch_ids:
        result = await db.execute(
            select(Branch.id, Branch.name).where(Branch.id.in_(branch_ids)),
        )
        branch_names = dict(result.all())

    customer_ids = {r.customer_id for r in latest}
    customer_emails = {}
    if customer_ids:
        result = await db.execute(
            select(User.id, User.email).where(User.id.in_(customer_ids)),
        )
        customer_emails = dict(result.all())

    logger.info(f"Analytics built over {days} days ({len(history)} orders)")
    return build_report(history, latest, branch_names, customer_emails, now, days)
