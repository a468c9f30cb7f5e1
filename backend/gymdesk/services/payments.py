from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gymdesk.models import Member, Membership, Payment
from gymdesk.services.records import apply_changes


def _require_membership_of_member(db: Session, *, membership_id: int, member_id: int) -> None:
    membership = db.get(Membership, membership_id)
    if membership is None or membership.member_id != member_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Membership not found for this member",
        )


def list_payments_for_member(db: Session, *, member_id: int) -> list[Payment]:
    return list(
        db.execute(
            select(Payment).where(Payment.member_id == member_id).order_by(Payment.payment_date.desc())
        ).scalars()
    )


def list_payments_for_gym(db: Session, *, gym_id: int, limit: int | None = None) -> list[Payment]:
    stmt = (
        select(Payment)
        .join(Member, Member.id == Payment.member_id)
        .where(Member.gym_id == gym_id)
        .order_by(Payment.payment_date.desc(), Payment.id.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars())


def get_recent_payments_by_gym_id(db: Session, *, gym_id: int, limit: int) -> list[Payment]:
    return list_payments_for_gym(db, gym_id=gym_id, limit=limit)


def create_payment(db: Session, *, member: Member, data: dict) -> Payment:
    if data.get("membership_id") is not None:
        _require_membership_of_member(db, membership_id=data["membership_id"], member_id=member.id)
    if data.get("payment_date") is None:
        # let the column default stamp it
        data = {k: v for k, v in data.items() if k != "payment_date"}

    payment = Payment(**data, member_id=member.id)
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def update_payment(db: Session, payment: Payment, changes: dict) -> Payment:
    if changes.get("membership_id") is not None:
        _require_membership_of_member(db, membership_id=changes["membership_id"], member_id=payment.member_id)

    apply_changes(payment, changes)
    db.commit()
    db.refresh(payment)
    return payment


def delete_payment(db: Session, payment_id: int) -> None:
    db.execute(delete(Payment).where(Payment.id == payment_id))
    db.commit()
