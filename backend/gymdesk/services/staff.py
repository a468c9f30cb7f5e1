from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from gymdesk.models import Staff
from gymdesk.services.records import apply_changes


def list_staff(db: Session, *, gym_id: int) -> list[Staff]:
    return list(db.execute(select(Staff).where(Staff.gym_id == gym_id).order_by(Staff.id.asc())).scalars())


def create_staff(db: Session, *, gym_id: int, data: dict) -> Staff:
    staff = Staff(**data, gym_id=gym_id)
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


def update_staff(db: Session, staff: Staff, changes: dict) -> Staff:
    apply_changes(staff, changes)
    db.commit()
    db.refresh(staff)
    return staff


def delete_staff(db: Session, staff_id: int) -> None:
    db.execute(delete(Staff).where(Staff.id == staff_id))
    db.commit()
