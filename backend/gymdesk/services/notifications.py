from __future__ import annotations

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from gymdesk.core.clock import utcnow
from gymdesk.models import Notification


def list_notifications(db: Session, *, user_id: int, limit: int | None = None) -> list[Notification]:
    stmt = (
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    if limit:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars())


def get_unread_count(db: Session, *, user_id: int) -> int:
    return db.scalar(
        select(func.count())
        .select_from(Notification)
        .where(Notification.user_id == user_id, Notification.is_read.is_(False))
    ) or 0


def create_notification(
    db: Session,
    *,
    user_id: int,
    title: str,
    message: str,
    type: str = "general",
    is_read: bool = False,
    commit: bool = True,
) -> Notification:
    n = Notification(user_id=user_id, title=title, message=message, type=type, is_read=is_read)
    db.add(n)
    if commit:
        db.commit()
        db.refresh(n)
    return n


def mark_notification_as_read(db: Session, notification: Notification) -> None:
    if not notification.is_read:
        notification.is_read = True
        notification.updated_at = utcnow()
        db.commit()


def mark_all_notifications_as_read(db: Session, *, user_id: int) -> int:
    """Mark every unread notification of the user as read. Safe to repeat."""
    res = db.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.is_read.is_(False))
        .values(is_read=True, updated_at=utcnow())
    )
    db.commit()
    return res.rowcount


def delete_notification(db: Session, notification_id: int) -> None:
    db.execute(delete(Notification).where(Notification.id == notification_id))
    db.commit()
