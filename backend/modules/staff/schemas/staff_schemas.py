from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from ..enums.staff_enums import StaffRole, StaffStatus


class StaffBase(BaseModel):
    name: str = Field(..., min_length=1)
    role: StaffRole
    shift: str = Field(..., min_length=1, description="e.g. 9am - 5pm")
    status: StaffStatus = StaffStatus.OFF_DUTY
    avatar: str = Field(..., min_length=1)


class StaffCreate(StaffBase):
    pass


class StaffUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[StaffRole] = None
    shift: Optional[str] = Field(None, min_length=1)
    status: Optional[StaffStatus] = None
    avatar: Optional[str] = Field(None, min_length=1)


class StaffOut(StaffBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
