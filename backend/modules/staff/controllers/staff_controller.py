from sqlalchemy.orm import Session
from typing import Optional

from modules.staff.services.staff_service import (
    fetch_all_staff, get_staff_by_id, register_staff, update_staff, remove_staff
)
from modules.staff.enums.staff_enums import StaffRole, StaffStatus
from modules.staff.schemas.staff_schemas import StaffCreate, StaffUpdate


async def get_all_staff(
    db: Session,
    status: Optional[StaffStatus] = None,
    role: Optional[StaffRole] = None,
):
    return await fetch_all_staff(db, status=status, role=role)


async def get_staff_member(db: Session, staff_id: int):
    return await get_staff_by_id(db, staff_id)


async def create_staff(db: Session, staff_data: StaffCreate):
    return await register_staff(db, staff_data)


async def edit_staff(db: Session, staff_id: int, staff_data: StaffUpdate):
    return await update_staff(db, staff_id, staff_data)


async def delete_staff(db: Session, staff_id: int):
    await remove_staff(db, staff_id)
    return {"message": "Staff member deleted successfully"}
