from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from gymdesk.models import Membership, MembershipPlan
from gymdesk.services.records import apply_changes


def list_plans(db: Session, *, gym_id: int) -> list[MembershipPlan]:
    return list(
        db.execute(
            select(MembershipPlan).where(MembershipPlan.gym_id == gym_id).order_by(MembershipPlan.id.asc())
        ).scalars()
    )


def create_plan(db: Session, *, gym_id: int, data: dict) -> MembershipPlan:
    plan = MembershipPlan(**data, gym_id=gym_id)
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


def update_plan(db: Session, plan: MembershipPlan, changes: dict) -> MembershipPlan:
    apply_changes(plan, changes)
    db.commit()
    db.refresh(plan)
    return plan


def delete_plan(db: Session, plan_id: int) -> None:
    """Delete a plan; refused while any membership still references it."""
    in_use = db.scalar(select(func.count()).select_from(Membership).where(Membership.plan_id == plan_id))
    if in_use:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Plan is used by {in_use} membership(s)",
        )
    db.execute(delete(MembershipPlan).where(MembershipPlan.id == plan_id))
    db.commit()
