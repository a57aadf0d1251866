from .staff_models import StaffMember

__all__ = ["StaffMember"]
