"""Read-only aggregates for the gym dashboard.

Everything is recomputed from the tables on each call. ``now`` defaults to
the server clock (naive UTC) and is injectable so tests can pin it.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from gymdesk.core.clock import utcnow
from gymdesk.models import Member, Membership, MembershipPlan, Payment
from gymdesk.services.memberships import get_expiring_memberships
from gymdesk.services.payments import get_recent_payments_by_gym_id

REVENUE_PERIODS = ("monthly", "yearly")
MONTHLY_BUCKETS = 12
YEARLY_BUCKETS = 5


def month_start(d: datetime) -> datetime:
    return datetime(d.year, d.month, 1)


def add_months(start: datetime, months: int) -> datetime:
    """Shift a first-of-month timestamp by ``months`` (may be negative)."""
    idx = start.year * 12 + (start.month - 1) + months
    return datetime(idx // 12, idx % 12 + 1, 1)


def _gym_revenue_between(db: Session, *, gym_id: int, start: datetime, end: datetime) -> float:
    """Sum of payment amounts with start <= payment_date < end."""
    total = db.scalar(
        select(func.coalesce(func.sum(Payment.amount), 0))
        .select_from(Payment)
        .join(Member, Member.id == Payment.member_id)
        .where(
            Member.gym_id == gym_id,
            Payment.payment_date >= start,
            Payment.payment_date < end,
        )
    )
    return float(total or 0)


def get_dashboard_stats(db: Session, *, gym_id: int, now: datetime | None = None) -> dict:
    now = now or utcnow()

    total_members = db.scalar(
        select(func.count()).select_from(Member).where(Member.gym_id == gym_id)
    ) or 0
    active_members = db.scalar(
        select(func.count()).select_from(Member).where(Member.gym_id == gym_id, Member.active.is_(True))
    ) or 0

    this_month = month_start(now)
    monthly_revenue = _gym_revenue_between(
        db, gym_id=gym_id, start=this_month, end=add_months(this_month, 1)
    )

    expiring_this_week = db.scalar(
        select(func.count())
        .select_from(Membership)
        .join(Member, Member.id == Membership.member_id)
        .where(
            Member.gym_id == gym_id,
            Membership.status == "active",
            Membership.end_date >= now,
            Membership.end_date <= now + timedelta(days=7),
        )
    ) or 0

    return {
        "total_members": int(total_members),
        "active_members": int(active_members),
        "monthly_revenue": monthly_revenue,
        "expiring_this_week": int(expiring_this_week),
    }


def get_membership_distribution(db: Session, *, gym_id: int) -> list[dict]:
    rows = db.execute(
        select(MembershipPlan.type, func.count(Membership.id))
        .select_from(Membership)
        .join(MembershipPlan, MembershipPlan.id == Membership.plan_id)
        .join(Member, Member.id == Membership.member_id)
        .where(Member.gym_id == gym_id, Membership.status == "active")
        .group_by(MembershipPlan.type)
        .order_by(MembershipPlan.type.asc())
    ).all()
    return [{"type": plan_type, "count": int(count)} for plan_type, count in rows]


def get_revenue_overview(
    db: Session,
    *,
    gym_id: int,
    period: str,
    now: datetime | None = None,
) -> list[dict]:
    """Revenue series in chronological order, current bucket last.

    monthly: 12 calendar months labelled "Jan".."Dec".
    yearly: current year and the 4 before it, labelled "2026".
    Buckets with no payments are reported as 0.
    """
    if period not in REVENUE_PERIODS:
        raise ValueError(f"Unknown revenue period: {period}")

    now = now or utcnow()

    if period == "monthly":
        first = add_months(month_start(now), -(MONTHLY_BUCKETS - 1))
        edges = [add_months(first, i) for i in range(MONTHLY_BUCKETS + 1)]
        labels = [calendar.month_abbr[e.month] for e in edges[:-1]]
    else:
        first_year = now.year - (YEARLY_BUCKETS - 1)
        edges = [datetime(first_year + i, 1, 1) for i in range(YEARLY_BUCKETS + 1)]
        labels = [str(e.year) for e in edges[:-1]]

    rows = db.execute(
        select(Payment.payment_date, Payment.amount)
        .join(Member, Member.id == Payment.member_id)
        .where(
            Member.gym_id == gym_id,
            Payment.payment_date >= edges[0],
            Payment.payment_date < edges[-1],
        )
    ).all()

    amounts = [0.0] * len(labels)
    for paid_at, amount in rows:
        for i in range(len(labels)):
            if edges[i] <= paid_at < edges[i + 1]:
                amounts[i] += float(amount)
                break

    return [{"period": label, "amount": amount} for label, amount in zip(labels, amounts)]


def get_dashboard(db: Session, *, gym_id: int, now: datetime | None = None) -> dict:
    now = now or utcnow()
    return {
        "stats": get_dashboard_stats(db, gym_id=gym_id, now=now),
        "membership_distribution": get_membership_distribution(db, gym_id=gym_id),
        "monthly_revenue": get_revenue_overview(db, gym_id=gym_id, period="monthly", now=now),
        "recent_payments": get_recent_payments_by_gym_id(db, gym_id=gym_id, limit=5),
        "expiring": get_expiring_memberships(db, gym_id=gym_id, days=7, now=now),
    }
