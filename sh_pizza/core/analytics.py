"""Analytics Aggregation — group-and-sum rollups behind the admin analytics endpoint.

Invariants:
    - All functions are PURE: rows in, plain dicts out (no IO, no DB)
    - Window metrics (totals, by-status, top branches) only see orders created
      at or after window_start(now, days)
    - revenue_by_month always yields exactly `months` entries, oldest first,
      zero-filled, the last one being the month containing `now`
    - Money is summed as Decimal and rounded to cents only when emitted

Design Decisions:
    - Fetch-then-aggregate over SQL GROUP BY: identical on PostgreSQL and SQLite,
      and testable without a database
"""

from collections import Counter, defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable
from uuid import UUID

from sh_pizza.core.clock import as_utc

REVENUE_MONTHS = 6
TOP_BRANCH_LIMIT = 5
RECENT_ORDER_LIMIT = 10
UNKNOWN_BRANCH = "Unknown Branch"
UNKNOWN_CUSTOMER = "Unknown"

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class OrderRow:
    """The slice of an order the rollups need."""
    id: UUID
    customer_id: UUID
    branch_id: UUID | None
    status: str
    total_amount: Decimal
    created_at: datetime


def _money(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def window_start(now: datetime, days: int) -> datetime:
    return as_utc(now) - timedelta(days=days)


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_starts(now: datetime, months: int = REVENUE_MONTHS) -> list[datetime]:
    """First instant (UTC) of each of the last `months` calendar months, oldest first."""
    now = as_utc(now)
    starts = []
    for back in range(months - 1, -1, -1):
        year, month = _shift_month(now.year, now.month, -back)
        starts.append(datetime(year, month, 1, tzinfo=timezone.utc))
    return starts


def summarize(rows: Iterable[OrderRow]) -> dict:
    """Order count, revenue, average order value and per-status counts."""
    rows = list(rows)
    revenue = sum((r.total_amount for r in rows), Decimal("0"))
    count = len(rows)
    average = revenue / count if count else Decimal("0")
    return {
        "total_orders": count,
        "total_revenue": _money(revenue),
        "average_order_value": _money(average),
        "orders_by_status": dict(Counter(r.status for r in rows)),
    }


def revenue_by_month(
    rows: Iterable[OrderRow], now: datetime, months: int = REVENUE_MONTHS,
) -> list[dict]:
    buckets: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
    for row in rows:
        created = as_utc(row.created_at)
        buckets[(created.year, created.month)] += row.total_amount
    return [
        {
            "month": start.strftime("%b %Y"),
            "revenue": _money(buckets.get((start.year, start.month), Decimal("0"))),
        }
        for start in month_starts(now, months)
    ]


def top_branches(
    rows: Iterable[OrderRow],
    branch_names: dict[UUID, str],
    limit: int = TOP_BRANCH_LIMIT,
) -> list[dict]:
    """Branches ranked by revenue, highest first."""
    stats: dict[UUID, list] = {}
    for row in rows:
        if row.branch_id is None:
            continue
        entry = stats.setdefault(row.branch_id, [0, Decimal("0")])
        entry[0] += 1
        entry[1] += row.total_amount
    ranked = sorted(stats.items(), key=lambda item: item[1][1], reverse=True)
    return [
        {
            "name": branch_names.get(branch_id, UNKNOWN_BRANCH),
            "orders": orders,
            "revenue": _money(revenue),
        }
        for branch_id, (orders, revenue) in ranked[:limit]
    ]


def recent_orders(
    rows: Iterable[OrderRow],
    customer_emails: dict[UUID, str],
    limit: int = RECENT_ORDER_LIMIT,
) -> list[dict]:
    newest = sorted(rows, key=lambda r: as_utc(r.created_at), reverse=True)
    return [
        {
            "id": row.id,
            "total_amount": row.total_amount,
            "status": row.status,
            "created_at": row.created_at,
            "customer_email": customer_emails.get(row.customer_id, UNKNOWN_CUSTOMER),
        }
        for row in newest[:limit]
    ]


def build_report(
    rows: Iterable[OrderRow],
    latest: Iterable[OrderRow],
    branch_names: dict[UUID, str],
    customer_emails: dict[UUID, str],
    now: datetime,
    days: int,
) -> dict:
    """Assemble the full analytics payload.

    `rows` must cover both the reporting window and the revenue-by-month
    span; `latest` are the newest orders regardless of date.
    """
    rows = list(rows)
    start = window_start(now, days)
    in_window = [r for r in rows if as_utc(r.created_at) >= start]
    report = summarize(in_window)
    report["revenue_by_month"] = revenue_by_month(rows, now)
    report["top_branches"] = top_branches(in_window, branch_names)
    report["recent_orders"] = recent_orders(latest, customer_emails)
    return report


def history_start(now: datetime, days: int) -> datetime:
    """Earliest created_at build_report needs to see."""
    return min(window_start(now, days), month_starts(now)[0])
