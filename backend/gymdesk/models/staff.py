from sqlalchemy import Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymdesk.core.db import Base
from gymdesk.models.mixins import TimestampMixin


class Staff(TimestampMixin, Base):
    __tablename__ = "staff"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[float | None] = mapped_column(Float, nullable=True)

    gym_id: Mapped[int] = mapped_column(ForeignKey("gyms.id"), index=True, nullable=False)

    gym = relationship("Gym", back_populates="staff")
