from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from workforce.config import settings
from workforce.database import Base
from workforce.enums import Role, enum_values
from workforce.utils.datetime_utils import utc_now


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    role = Column(Enum(Role, name="employee_role", values_callable=enum_values), nullable=False, default=Role.EMPLOYEE)
    leave_balance = Column(Integer, nullable=False, default=settings.DEFAULT_LEAVE_BALANCE)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    attendance_records = relationship(
        "AttendanceRecord",
        back_populates="employee",
        cascade="all, delete-orphan",
    )
    leave_requests = relationship(
        "LeaveRequest",
        back_populates="employee",
        foreign_keys="LeaveRequest.employee_id",
        cascade="all, delete-orphan",
    )
    # Not owned: deleting a reviewer only clears the reference.
    reviewed_leave_requests = relationship(
        "LeaveRequest",
        back_populates="reviewer",
        foreign_keys="LeaveRequest.reviewed_by",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
