# backend/tests/factories/staff.py

import factory
from factory import Sequence
from .base import BaseFactory
from modules.staff.enums.staff_enums import StaffRole, StaffStatus
from modules.staff.models.staff_models import StaffMember


class StaffMemberFactory(BaseFactory):
    """Factory for creating staff members."""

    class Meta:
        model = StaffMember

    name = Sequence(lambda n: f"Staff Member {n}")
    role = factory.Iterator([StaffRole.WAITER, StaffRole.HEAD_WAITER, StaffRole.CHEF])
    shift = "9am - 5pm"
    status = StaffStatus.ON_SHIFT
    avatar = "https://placehold.co/96x96.png"
