"""Expire lapsed memberships and tell gym owners about it.

Run once a day (e.g. from cron) from the backend environment:

    python -m gymdesk.scripts.expire_memberships

Every membership still marked "active" whose end date has passed is switched
to "expired", and the owning user gets a "membership" notification. Owners
also get one digest notification per gym for memberships ending within
EXPIRY_NOTICE_DAYS.

Env:
  - DATABASE_URL
  - EXPIRY_NOTICE_DAYS (default 7)
  - DRY_RUN=1 prints matches without writing anything
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from gymdesk.core.clock import utcnow
from gymdesk.core.config import settings
from gymdesk.core.db import SessionLocal
from gymdesk.models import Gym, Member, Membership
from gymdesk.services.notifications import create_notification

log = logging.getLogger("gymdesk.scripts.expire_memberships")

DRY_RUN = os.getenv("DRY_RUN", "").strip() in ("1", "true", "yes")


def expire_lapsed(db: Session, *, now: datetime, dry_run: bool = False) -> int:
    rows = db.execute(
        select(Membership, Member, Gym)
        .join(Member, Member.id == Membership.member_id)
        .join(Gym, Gym.id == Member.gym_id)
        .where(Membership.status == "active", Membership.end_date < now)
        .order_by(Membership.end_date.asc())
    ).all()

    expired = 0
    for membership, member, gym in rows:
        if dry_run:
            print(f"DRY_RUN expire: membership_id={membership.id} member=\"{member.name}\" gym=\"{gym.name}\" end={membership.end_date}")
            continue

        membership.status = "expired"
        membership.updated_at = now
        create_notification(
            db,
            user_id=gym.user_id,
            title="Membership expired",
            message=f"{member.name}'s membership at {gym.name} expired on {membership.end_date:%Y-%m-%d}.",
            type="membership",
            commit=False,
        )
        expired += 1

    if expired:
        db.commit()
    return expired


def notify_expiring(db: Session, *, now: datetime, days: int, dry_run: bool = False) -> int:
    until = now + timedelta(days=days)
    rows = db.execute(
        select(Gym, Membership.id)
        .join(Member, Member.gym_id == Gym.id)
        .join(Membership, Membership.member_id == Member.id)
        .where(
            Membership.status == "active",
            Membership.end_date >= now,
            Membership.end_date <= until,
        )
    ).all()

    per_gym: dict[int, tuple[Gym, int]] = {}
    for gym, _membership_id in rows:
        _, count = per_gym.get(gym.id, (gym, 0))
        per_gym[gym.id] = (gym, count + 1)

    sent = 0
    for gym, count in per_gym.values():
        if dry_run:
            print(f"DRY_RUN expiring: gym=\"{gym.name}\" count={count}")
            continue
        create_notification(
            db,
            user_id=gym.user_id,
            title="Memberships expiring soon",
            message=f"{count} membership(s) at {gym.name} end within {days} days.",
            type="membership",
            commit=False,
        )
        sent += 1

    if sent:
        db.commit()
    return sent


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    now = utcnow()
    with SessionLocal() as db:
        expired = expire_lapsed(db, now=now, dry_run=DRY_RUN)
        notices = notify_expiring(db, now=now, days=settings.EXPIRY_NOTICE_DAYS, dry_run=DRY_RUN)
    log.info("membership maintenance done expired=%s expiring_notices=%s", expired, notices)
    print(f"expired={expired} expiring_notices={notices}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
