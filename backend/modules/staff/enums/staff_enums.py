from enum import Enum


class StaffStatus(str, Enum):
    ON_SHIFT = "On Shift"
    OFF_DUTY = "Off Duty"


class StaffRole(str, Enum):
    MANAGER = "Manager"
    HEAD_WAITER = "Head Waiter"
    WAITER = "Waiter"
    CHEF = "Chef"
    SOUS_CHEF = "Sous Chef"
    HOSTESS = "Hostess"
