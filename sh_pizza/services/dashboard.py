"""Dashboard Service — admin console counters and the signed-in user's home view.

Invariants:
    - Admin "active offers" counts the is_active flag only
    - Customer recent orders are the caller's own, newest first
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sh_pizza.core.roles import dashboard_path_for
from sh_pizza.models import Branch, Notification, Offer, Order, Pizza, User
from sh_pizza.services.offers import OfferService

ADMIN_RECENT_ORDERS = 5
CUSTOMER_RECENT_ORDERS = 5


async def _count(db: AsyncSession, model: type, *conditions) -> int:
    total = await db.scalar(
        select(func.count()).select_from(model).where(*conditions),
    )
    return total or 0


async def admin_stats(db: AsyncSession) -> dict:
    result = await db.execute(
        select(Order).order_by(Order.created_at.desc()).limit(ADMIN_RECENT_ORDERS),
    )
    return {
        "total_users": await _count(db, User),
        "total_branches": await _count(db, Branch),
        "total_pizzas": await _count(db, Pizza),
        "total_orders": await _count(db, Order),
        "active_offers": await _count(db, Offer, Offer.is_active.is_(True)),
        "recent_orders": list(result.scalars().all()),
    }


async def customer_dashboard(db: AsyncSession, user: User) -> dict:
    result = await db.execute(
        select(Order)
        .where(Order.customer_id == user.id)
        .order_by(Order.created_at.desc())
        .limit(CUSTOMER_RECENT_ORDERS),
    )
    unread = await _count(
        db, Notification,
        Notification.user_id == user.id, Notification.is_read.is_(False),
    )
    return {
        "user": user,
        "dashboard_path": dashboard_path_for(user.role),
        "recent_orders": list(result.scalars().all()),
        "unread_notifications": unread,
        "live_offers": await OfferService(db).live_offers(),
    }
