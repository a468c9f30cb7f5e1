from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gymdesk.models import Gym, Member, Membership, MembershipPlan, Payment, Staff
from gymdesk.services.records import apply_changes

log = logging.getLogger("gymdesk.gyms")


def list_gyms(db: Session, *, user_id: int) -> list[Gym]:
    return list(db.execute(select(Gym).where(Gym.user_id == user_id).order_by(Gym.id.asc())).scalars())


def create_gym(db: Session, *, user_id: int, data: dict) -> Gym:
    gym = Gym(**data, user_id=user_id)
    db.add(gym)
    db.commit()
    db.refresh(gym)
    log.info("gym created id=%s user_id=%s", gym.id, user_id)
    return gym


def update_gym(db: Session, gym: Gym, changes: dict) -> Gym:
    apply_changes(gym, changes)
    db.commit()
    db.refresh(gym)
    return gym


def delete_gym(db: Session, gym_id: int) -> None:
    """Hard-delete a gym together with everything hanging off it.

    Dependents are removed with bulk deletes, leaves first, in one transaction.
    """
    member_ids = select(Member.id).where(Member.gym_id == gym_id)

    payments = db.execute(delete(Payment).where(Payment.member_id.in_(member_ids)))
    memberships = db.execute(delete(Membership).where(Membership.member_id.in_(member_ids)))
    members = db.execute(delete(Member).where(Member.gym_id == gym_id))

    db.execute(delete(MembershipPlan).where(MembershipPlan.gym_id == gym_id))
    db.execute(delete(Staff).where(Staff.gym_id == gym_id))
    db.execute(delete(Gym).where(Gym.id == gym_id))

    db.commit()
    log.info(
        "gym deleted id=%s members=%s memberships=%s payments=%s",
        gym_id,
        members.rowcount,
        memberships.rowcount,
        payments.rowcount,
    )
