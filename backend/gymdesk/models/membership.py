from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymdesk.core.db import Base
from gymdesk.models.mixins import TimestampMixin


class Membership(TimestampMixin, Base):
    """A time-bounded grant of a plan to a member."""

    __tablename__ = "memberships"
    __table_args__ = (CheckConstraint("end_date > start_date", name="ck_memberships_end_after_start"),)

    id: Mapped[int] = mapped_column(primary_key=True)

    member_id: Mapped[int] = mapped_column(ForeignKey("members.id"), index=True, nullable=False)
    plan_id: Mapped[int] = mapped_column(ForeignKey("membership_plans.id"), index=True, nullable=False)

    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")  # active | expired | cancelled

    member = relationship("Member", back_populates="memberships")
    plan = relationship("MembershipPlan", back_populates="memberships")
    payments = relationship("Payment", back_populates="membership")
