"""Ownership gate.

Every gym-scoped record is owned by the user that owns its gym. Each
``*_owner`` function walks one entity's chain up to ``Gym.user_id`` in a
single query and returns ``(record, owner_user_id)``, or ``None`` when the
record (or any link of its chain) is missing. ``require_*`` helpers turn that
into 404 / 403 for route handlers.
"""

from __future__ import annotations

from typing import Callable

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from gymdesk.models import Gym, Member, Membership, MembershipPlan, Notification, Payment, Staff, User

OwnedRow = tuple  # (record, owner_user_id)


def gym_owner(db: Session, gym_id: int) -> OwnedRow | None:
    return db.execute(select(Gym, Gym.user_id).where(Gym.id == gym_id)).first()


def member_owner(db: Session, member_id: int) -> OwnedRow | None:
    return db.execute(
        select(Member, Gym.user_id)
        .join(Gym, Gym.id == Member.gym_id)
        .where(Member.id == member_id)
    ).first()


def staff_owner(db: Session, staff_id: int) -> OwnedRow | None:
    return db.execute(
        select(Staff, Gym.user_id)
        .join(Gym, Gym.id == Staff.gym_id)
        .where(Staff.id == staff_id)
    ).first()


def plan_owner(db: Session, plan_id: int) -> OwnedRow | None:
    return db.execute(
        select(MembershipPlan, Gym.user_id)
        .join(Gym, Gym.id == MembershipPlan.gym_id)
        .where(MembershipPlan.id == plan_id)
    ).first()


def membership_owner(db: Session, membership_id: int) -> OwnedRow | None:
    return db.execute(
        select(Membership, Gym.user_id)
        .join(Member, Member.id == Membership.member_id)
        .join(Gym, Gym.id == Member.gym_id)
        .where(Membership.id == membership_id)
    ).first()


def payment_owner(db: Session, payment_id: int) -> OwnedRow | None:
    return db.execute(
        select(Payment, Gym.user_id)
        .join(Member, Member.id == Payment.member_id)
        .join(Gym, Gym.id == Member.gym_id)
        .where(Payment.id == payment_id)
    ).first()


def notification_owner(db: Session, notification_id: int) -> OwnedRow | None:
    return db.execute(
        select(Notification, Notification.user_id).where(Notification.id == notification_id)
    ).first()


def _require(
    resolve: Callable[[Session, int], OwnedRow | None],
    label: str,
    db: Session,
    entity_id: int,
    user: User,
):
    row = resolve(db, entity_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")

    record, owner_id = row
    if owner_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return record


def require_gym(db: Session, *, gym_id: int, user: User) -> Gym:
    return _require(gym_owner, "Gym", db, gym_id, user)


def require_member(db: Session, *, member_id: int, user: User) -> Member:
    return _require(member_owner, "Member", db, member_id, user)


def require_staff(db: Session, *, staff_id: int, user: User) -> Staff:
    return _require(staff_owner, "Staff member", db, staff_id, user)


def require_plan(db: Session, *, plan_id: int, user: User) -> MembershipPlan:
    return _require(plan_owner, "Membership plan", db, plan_id, user)


def require_membership(db: Session, *, membership_id: int, user: User) -> Membership:
    return _require(membership_owner, "Membership", db, membership_id, user)


def require_payment(db: Session, *, payment_id: int, user: User) -> Payment:
    return _require(payment_owner, "Payment", db, payment_id, user)


def require_notification(db: Session, *, notification_id: int, user: User) -> Notification:
    return _require(notification_owner, "Notification", db, notification_id, user)
