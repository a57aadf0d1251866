from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from core.database import Base
from core.mixins import TimestampMixin
from ..enums.staff_enums import StaffRole, StaffStatus


class StaffMember(Base, TimestampMixin):
    __tablename__ = "staff"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    role = Column(Enum(StaffRole, name="staff_role", native_enum=False, create_constraint=True, values_callable=lambda obj: [e.value for e in obj]), nullable=False)
    shift = Column(String, nullable=False)
    status = Column(Enum(StaffStatus, name="staff_status", native_enum=False, create_constraint=True, values_callable=lambda obj: [e.value for e in obj]), default=StaffStatus.OFF_DUTY, nullable=False, index=True)
    avatar = Column(String, nullable=False)

    # orders.staff_id is nulled by the database on delete
    orders = relationship("Order", back_populates="staff", passive_deletes=True)
