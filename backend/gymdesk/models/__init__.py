from .enums import MembershipStatus, NotificationType, PaymentMethod, PaymentStatus, PlanType, UserRole
from .user import User
from .gym import Gym
from .staff import Staff
from .membership_plan import MembershipPlan
from .member import Member
from .membership import Membership
from .payment import Payment
from .notification import Notification

__all__ = [
    "MembershipStatus",
    "NotificationType",
    "PaymentMethod",
    "PaymentStatus",
    "PlanType",
    "UserRole",
    "User",
    "Gym",
    "Staff",
    "MembershipPlan",
    "Member",
    "Membership",
    "Payment",
    "Notification",
]
