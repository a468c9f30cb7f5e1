from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_notification
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import NotificationCreateIn, NotificationOut, UnreadCountOut
from gymdesk.services import notifications as notifications_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationOut])
def list_my_notifications(
    limit: int | None = Query(default=None, ge=1, le=500),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return notifications_service.list_notifications(db, user_id=user.id, limit=limit)


@router.get("/unread-count", response_model=UnreadCountOut)
def unread_count(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return {"count": notifications_service.get_unread_count(db, user_id=user.id)}


@router.post("", response_model=NotificationOut, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return notifications_service.create_notification(db, user_id=user.id, **payload.model_dump())


@router.put("/read-all", status_code=status.HTTP_204_NO_CONTENT)
def mark_all_read(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    notifications_service.mark_all_notifications_as_read(db, user_id=user.id)


@router.put("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    n = require_notification(db, notification_id=notification_id, user=user)
    notifications_service.mark_notification_as_read(db, n)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_notification(db, notification_id=notification_id, user=user)
    notifications_service.delete_notification(db, notification_id)
