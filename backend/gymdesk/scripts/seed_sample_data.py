"""Seed a local database with a sample owner and one populated gym.

    python -m gymdesk.scripts.seed_sample_data

Safe to re-run: does nothing if the sample owner already exists.
Login afterwards with owner / owner123.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from gymdesk.core.clock import utcnow
from gymdesk.core.db import SessionLocal
from gymdesk.models import Gym, Member, Membership, MembershipPlan, Payment, Staff
from gymdesk.services.dashboard import add_months, month_start
from gymdesk.services.notifications import create_notification
from gymdesk.services.users import create_user, get_user_by_username

log = logging.getLogger("gymdesk.scripts.seed")

SAMPLE_USERNAME = "owner"

PLANS = [
    # name, type, months, price
    ("Monthly Basic", "monthly", 1, 1500.0),
    ("Quarterly Fit", "quarterly", 3, 4000.0),
    ("Half-Year Pro", "half-yearly", 6, 7500.0),
    ("Annual Elite", "annual", 12, 14000.0),
]

MEMBERS = [
    ("Asha Rao", "9000000001", "female"),
    ("Ravi Kumar", "9876500000", "male"),
    ("Meera Iyer", "9000000003", "female"),
    ("Arjun Singh", "9000000004", "male"),
]


def seed(db: Session, *, now: datetime) -> bool:
    if get_user_by_username(db, SAMPLE_USERNAME) is not None:
        return False

    owner = create_user(
        db,
        username=SAMPLE_USERNAME,
        password="owner123",
        name="Gym Owner",
        email="owner@example.com",
        phone="8765432109",
    )

    gym = Gym(
        name="Fitness Plus",
        address="123 Main Street",
        city="Mumbai",
        state="Maharashtra",
        zipcode="400001",
        phone="9876543210",
        email="info@fitnessplus.example",
        user_id=owner.id,
    )
    db.add(gym)
    db.flush()

    db.add(Staff(name="Vikram Shah", email="vikram@fitnessplus.example", position="Trainer", salary=25000.0, gym_id=gym.id))
    db.add(Staff(name="Neha Joshi", email="neha@fitnessplus.example", position="Front Desk", salary=18000.0, gym_id=gym.id))

    plans = []
    for name, plan_type, months, price in PLANS:
        plan = MembershipPlan(name=name, type=plan_type, duration=months, price=price, gym_id=gym.id)
        db.add(plan)
        plans.append(plan)
    db.flush()

    for i, (name, phone, gender) in enumerate(MEMBERS):
        member = Member(name=name, phone=phone, gender=gender, gym_id=gym.id, active=True)
        db.add(member)
        db.flush()

        plan = plans[i % len(plans)]
        # first member's plan runs out in a few days so the dashboard shows something expiring
        start = now - timedelta(days=30 * plan.duration - 3) if i == 0 else now - timedelta(days=10 * i)
        end = add_months(month_start(start), plan.duration) + (start - month_start(start))
        membership = Membership(member_id=member.id, plan_id=plan.id, start_date=start, end_date=end, status="active")
        db.add(membership)
        db.flush()

        db.add(
            Payment(
                member_id=member.id,
                membership_id=membership.id,
                amount=plan.price,
                payment_date=start,
                payment_method="upi" if i % 2 else "cash",
                status="paid",
            )
        )

    create_notification(
        db,
        user_id=owner.id,
        title="Welcome",
        message="Sample data loaded for Fitness Plus.",
        type="general",
        commit=False,
    )
    db.commit()
    return True


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    with SessionLocal() as db:
        created = seed(db, now=utcnow())
    log.info("seed %s", "done" if created else "skipped: sample owner already exists")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
