from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from core.exceptions import NotFoundError
from ..models.staff_models import StaffMember
from ..enums.staff_enums import StaffRole, StaffStatus
from ..schemas.staff_schemas import StaffCreate, StaffUpdate

logger = logging.getLogger(__name__)


async def fetch_all_staff(
    db: Session,
    status: Optional[StaffStatus] = None,
    role: Optional[StaffRole] = None,
) -> List[StaffMember]:
    query = db.query(StaffMember)

    if status is not None:
        query = query.filter(StaffMember.status == status)
    if role is not None:
        query = query.filter(StaffMember.role == role)

    return query.order_by(StaffMember.name).all()


async def get_staff_by_id(db: Session, staff_id: int) -> StaffMember:
    member = db.query(StaffMember).filter(StaffMember.id == staff_id).first()
    if not member:
        raise NotFoundError(f"Staff member with id {staff_id} not found")
    return member


async def register_staff(db: Session, staff_data: StaffCreate) -> StaffMember:
    member = StaffMember(**staff_data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)

    logger.info(f"Registered staff member {member.id} ({member.role.value})")
    return member


async def update_staff(
    db: Session, staff_id: int, staff_data: StaffUpdate
) -> StaffMember:
    member = await get_staff_by_id(db, staff_id)

    for field, value in staff_data.model_dump(
        exclude_unset=True, exclude_none=True
    ).items():
        setattr(member, field, value)

    db.commit()
    db.refresh(member)
    return member


async def remove_staff(db: Session, staff_id: int) -> None:
    """Delete a staff member; their orders keep existing unassigned"""
    member = await get_staff_by_id(db, staff_id)
    db.delete(member)
    db.commit()

    logger.info(f"Removed staff member {staff_id}")
