from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymdesk.core.clock import utcnow
from gymdesk.core.db import Base
from gymdesk.models.mixins import TimestampMixin


class Payment(TimestampMixin, Base):
    __tablename__ = "payments"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_payments_amount_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True)

    member_id: Mapped[int] = mapped_column(ForeignKey("members.id"), index=True, nullable=False)
    # null => payment not tied to a specific membership
    membership_id: Mapped[int | None] = mapped_column(ForeignKey("memberships.id"), index=True, nullable=True)

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    payment_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, index=True)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    reference: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="paid")  # paid | pending | failed

    member = relationship("Member", back_populates="payments")
    membership = relationship("Membership", back_populates="payments")
