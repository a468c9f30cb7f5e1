from sqlalchemy import CheckConstraint, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymdesk.core.db import Base
from gymdesk.models.mixins import TimestampMixin


class MembershipPlan(TimestampMixin, Base):
    __tablename__ = "membership_plans"
    __table_args__ = (
        CheckConstraint("duration > 0", name="ck_membership_plans_duration_positive"),
        CheckConstraint("price >= 0", name="ck_membership_plans_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # months
    price: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # monthly | quarterly | half-yearly | annual

    gym_id: Mapped[int] = mapped_column(ForeignKey("gyms.id"), index=True, nullable=False)

    gym = relationship("Gym", back_populates="membership_plans")
    memberships = relationship("Membership", back_populates="plan")
