"""Request/response contracts for the JSON API.

These models know nothing about the ORM: they validate payloads (required
fields, ranges, enumerated values) and describe what goes back on the wire.
Wire names are camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from gymdesk.core.clock import to_naive_utc
from gymdesk.models.enums import (
    MembershipStatus,
    NotificationType,
    PaymentMethod,
    PaymentStatus,
    PlanType,
    UserRole,
)


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_default=True,
    )

    @field_validator("*", mode="after")
    @classmethod
    def datetimes_to_naive_utc(cls, v):
        if isinstance(v, datetime):
            return to_naive_utc(v)
        return v


class PartialUpdate(ApiModel):
    """Base for PUT payloads: every field optional, only supplied fields are applied.

    Fields listed in NOT_NULL may be omitted but not sent as null.
    """

    NOT_NULL: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.NOT_NULL:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class RecordOut(ApiModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


# ---------- Auth / users ----------

class RegisterIn(ApiModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=3, max_length=254)
    phone: Optional[str] = Field(default=None, max_length=32)


class LoginIn(ApiModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(RecordOut):
    username: str
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole


# ---------- Gyms ----------

class GymCreateIn(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=300)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zipcode: str = Field(..., min_length=1, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=254)


class GymUpdateIn(PartialUpdate):
    NOT_NULL = ("name", "address", "city", "state", "zipcode")

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    address: Optional[str] = Field(default=None, min_length=1, max_length=300)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=100)
    zipcode: Optional[str] = Field(default=None, min_length=1, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=254)


class GymOut(RecordOut):
    name: str
    address: str
    city: str
    state: str
    zipcode: str
    phone: Optional[str] = None
    email: Optional[str] = None
    user_id: int


# ---------- Staff ----------

class StaffCreateIn(ApiModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=3, max_length=254)
    phone: Optional[str] = Field(default=None, max_length=32)
    position: str = Field(..., min_length=1, max_length=100)
    salary: Optional[float] = Field(default=None, ge=0)


class StaffUpdateIn(PartialUpdate):
    NOT_NULL = ("name", "email", "position")

    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    email: Optional[str] = Field(default=None, min_length=3, max_length=254)
    phone: Optional[str] = Field(default=None, max_length=32)
    position: Optional[str] = Field(default=None, min_length=1, max_length=100)
    salary: Optional[float] = Field(default=None, ge=0)


class StaffOut(RecordOut):
    name: str
    email: str
    phone: Optional[str] = None
    position: str
    salary: Optional[float] = None
    gym_id: int


# ---------- Membership plans ----------

class PlanCreateIn(ApiModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: Optional[str] = None
    duration: int = Field(..., gt=0, description="months")
    price: float = Field(..., ge=0)
    type: PlanType


class PlanUpdateIn(PartialUpdate):
    NOT_NULL = ("name", "duration", "price", "type")

    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0)
    type: Optional[PlanType] = None


class PlanOut(RecordOut):
    name: str
    description: Optional[str] = None
    duration: int
    price: float
    type: str
    gym_id: int


# ---------- Members ----------

class MemberCreateIn(ApiModel):
    name: str = Field(..., min_length=1, max_length=128)
    phone: str = Field(..., min_length=1, max_length=32)
    email: Optional[str] = Field(default=None, max_length=254)
    address: Optional[str] = Field(default=None, max_length=300)
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = Field(default=None, max_length=32)
    emergency_contact: Optional[str] = Field(default=None, max_length=128)
    active: bool = True


class MemberUpdateIn(PartialUpdate):
    NOT_NULL = ("name", "phone", "active")

    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=32)
    email: Optional[str] = Field(default=None, max_length=254)
    address: Optional[str] = Field(default=None, max_length=300)
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = Field(default=None, max_length=32)
    emergency_contact: Optional[str] = Field(default=None, max_length=128)
    active: Optional[bool] = None


class MemberOut(RecordOut):
    name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    emergency_contact: Optional[str] = None
    active: bool
    gym_id: int


# ---------- Memberships ----------

class MembershipCreateIn(ApiModel):
    plan_id: int = Field(..., gt=0)
    start_date: datetime
    end_date: datetime
    status: MembershipStatus = MembershipStatus.ACTIVE

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


class MembershipUpdateIn(PartialUpdate):
    NOT_NULL = ("plan_id", "start_date", "end_date", "status")

    plan_id: Optional[int] = Field(default=None, gt=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[MembershipStatus] = None


class MembershipOut(RecordOut):
    member_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime
    status: str


# ---------- Payments ----------

class PaymentCreateIn(ApiModel):
    amount: float = Field(..., ge=0)
    payment_method: PaymentMethod
    membership_id: Optional[int] = Field(default=None, gt=0)
    payment_date: Optional[datetime] = None
    reference: Optional[str] = Field(default=None, max_length=200)
    status: PaymentStatus = PaymentStatus.PAID


class PaymentUpdateIn(PartialUpdate):
    NOT_NULL = ("amount", "payment_method", "payment_date", "status")

    amount: Optional[float] = Field(default=None, ge=0)
    payment_method: Optional[PaymentMethod] = None
    membership_id: Optional[int] = Field(default=None, gt=0)
    payment_date: Optional[datetime] = None
    reference: Optional[str] = Field(default=None, max_length=200)
    status: Optional[PaymentStatus] = None


class PaymentOut(RecordOut):
    member_id: int
    membership_id: Optional[int] = None
    amount: float
    payment_date: datetime
    payment_method: str
    reference: Optional[str] = None
    status: str


# ---------- Notifications ----------

class NotificationCreateIn(ApiModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.GENERAL
    is_read: bool = False


class NotificationOut(RecordOut):
    title: str
    message: str
    type: str
    user_id: int
    is_read: bool


class UnreadCountOut(ApiModel):
    count: int


# ---------- Dashboard ----------

class DashboardStatsOut(ApiModel):
    total_members: int
    active_members: int
    monthly_revenue: float
    expiring_this_week: int


class DistributionItemOut(ApiModel):
    type: str
    count: int


class RevenuePointOut(ApiModel):
    period: str
    amount: float


class DashboardOut(ApiModel):
    stats: DashboardStatsOut
    membership_distribution: list[DistributionItemOut]
    monthly_revenue: list[RevenuePointOut]
    recent_payments: list[PaymentOut]
    expiring: list[MembershipOut]
