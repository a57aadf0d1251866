from fastapi import APIRouter, Depends, Query, status as http_status
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from modules.staff.controllers.staff_controller import (
    get_all_staff,
    get_staff_member,
    create_staff,
    edit_staff,
    delete_staff,
)
from modules.staff.enums.staff_enums import StaffRole, StaffStatus
from modules.staff.schemas.staff_schemas import StaffCreate, StaffUpdate, StaffOut

router = APIRouter(prefix="/staff", tags=["Staff"])


@router.get("", response_model=List[StaffOut])
async def list_staff(
    status: Optional[StaffStatus] = Query(None),
    role: Optional[StaffRole] = Query(None),
    db: Session = Depends(get_db),
):
    return await get_all_staff(db, status=status, role=role)


@router.post("", response_model=StaffOut, status_code=http_status.HTTP_201_CREATED)
async def add_staff(staff_data: StaffCreate, db: Session = Depends(get_db)):
    return await create_staff(db, staff_data)


@router.get("/{staff_id}", response_model=StaffOut)
async def get_staff(staff_id: int, db: Session = Depends(get_db)):
    return await get_staff_member(db, staff_id)


@router.put("/{staff_id}", response_model=StaffOut)
async def update_staff_member(
    staff_id: int, staff_data: StaffUpdate, db: Session = Depends(get_db)
):
    return await edit_staff(db, staff_id, staff_data)


@router.delete("/{staff_id}")
async def remove_staff_member(staff_id: int, db: Session = Depends(get_db)):
    return await delete_staff(db, staff_id)
