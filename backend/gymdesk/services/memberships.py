from __future__ import annotations

import logging
from datetime import datetime, timedelta

from fastapi import HTTPException, status
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from gymdesk.core.clock import utcnow
from gymdesk.models import Member, Membership, MembershipPlan, Payment
from gymdesk.services.records import apply_changes

log = logging.getLogger("gymdesk.memberships")


def _require_plan_in_gym(db: Session, *, plan_id: int, gym_id: int) -> MembershipPlan:
    plan = db.get(MembershipPlan, plan_id)
    if plan is None or plan.gym_id != gym_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Plan not found in this gym")
    return plan


def list_memberships_for_member(db: Session, *, member_id: int) -> list[Membership]:
    return list(
        db.execute(
            select(Membership).where(Membership.member_id == member_id).order_by(Membership.start_date.desc())
        ).scalars()
    )


def list_memberships_for_gym(db: Session, *, gym_id: int) -> list[Membership]:
    return list(
        db.execute(
            select(Membership)
            .join(Member, Member.id == Membership.member_id)
            .where(Member.gym_id == gym_id)
            .order_by(Membership.id.asc())
        ).scalars()
    )


def get_expiring_memberships(
    db: Session,
    *,
    gym_id: int,
    days: int,
    now: datetime | None = None,
) -> list[Membership]:
    """Active memberships of the gym whose end date falls in [now, now + days]."""
    now = now or utcnow()
    until = now + timedelta(days=days)
    return list(
        db.execute(
            select(Membership)
            .join(Member, Member.id == Membership.member_id)
            .where(
                Member.gym_id == gym_id,
                Membership.status == "active",
                Membership.end_date >= now,
                Membership.end_date <= until,
            )
            .order_by(Membership.end_date.asc())
        ).scalars()
    )


def create_membership(db: Session, *, member: Member, data: dict) -> Membership:
    _require_plan_in_gym(db, plan_id=data["plan_id"], gym_id=member.gym_id)

    membership = Membership(**data, member_id=member.id)
    db.add(membership)
    db.commit()
    db.refresh(membership)
    return membership


def update_membership(db: Session, membership: Membership, changes: dict) -> Membership:
    if "plan_id" in changes and changes["plan_id"] != membership.plan_id:
        member = db.get(Member, membership.member_id)
        _require_plan_in_gym(db, plan_id=changes["plan_id"], gym_id=member.gym_id)

    start = changes.get("start_date", membership.start_date)
    end = changes.get("end_date", membership.end_date)
    if end <= start:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="endDate must be after startDate")

    apply_changes(membership, changes)
    db.commit()
    db.refresh(membership)
    return membership


def delete_membership(db: Session, membership_id: int) -> None:
    """Delete a membership; its payments stay on the member, detached."""
    detached = db.execute(
        update(Payment).where(Payment.membership_id == membership_id).values(membership_id=None)
    )
    db.execute(delete(Membership).where(Membership.id == membership_id))
    db.commit()
    log.info("membership deleted id=%s detached_payments=%s", membership_id, detached.rowcount)
