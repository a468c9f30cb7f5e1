from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gymdesk.models import Member, Membership, Payment
from gymdesk.services.records import apply_changes

log = logging.getLogger("gymdesk.members")


def list_members(db: Session, *, gym_id: int, active: bool | None = None) -> list[Member]:
    stmt = select(Member).where(Member.gym_id == gym_id).order_by(Member.id.asc())
    if active is not None:
        stmt = stmt.where(Member.active.is_(active))
    return list(db.execute(stmt).scalars())


def create_member(db: Session, *, gym_id: int, data: dict) -> Member:
    member = Member(**data, gym_id=gym_id)
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def update_member(db: Session, member: Member, changes: dict) -> Member:
    apply_changes(member, changes)
    db.commit()
    db.refresh(member)
    return member


def delete_member(db: Session, member_id: int) -> None:
    """Delete a member with their memberships and payment history."""
    payments = db.execute(delete(Payment).where(Payment.member_id == member_id))
    memberships = db.execute(delete(Membership).where(Membership.member_id == member_id))
    db.execute(delete(Member).where(Member.id == member_id))
    db.commit()
    log.info(
        "member deleted id=%s memberships=%s payments=%s",
        member_id,
        memberships.rowcount,
        payments.rowcount,
    )
