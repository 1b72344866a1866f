from sqlalchemy import Column, Date, DateTime, Enum, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from workforce.database import Base
from workforce.enums import AttendanceStatus, enum_values
from workforce.utils.datetime_utils import utc_now


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    work_date = Column(Date, nullable=False)
    check_in_time = Column(DateTime(timezone=True))
    check_out_time = Column(DateTime(timezone=True))
    hours_worked = Column(Float, nullable=False, default=0.0)
    status = Column(
        Enum(AttendanceStatus, name="attendance_status", values_callable=enum_values),
        nullable=False,
        default=AttendanceStatus.PRESENT,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    employee = relationship("Employee", back_populates="attendance_records")

    __table_args__ = (
        UniqueConstraint("employee_id", "work_date", name="uix_attendance_employee_day"),
    )

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_time is not None
