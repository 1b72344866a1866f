from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from workforce.database import Base
from workforce.enums import LeaveStatus, LeaveType, enum_values
from workforce.utils.datetime_utils import utc_now


class LeaveRequest(Base):
    __tablename__ = "leave_requests"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    leave_type = Column(Enum(LeaveType, name="leave_type", values_callable=enum_values), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text)
    status = Column(
        Enum(LeaveStatus, name="leave_status", values_callable=enum_values),
        nullable=False,
        default=LeaveStatus.PENDING,
        index=True,
    )
    reviewed_by = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"))
    reviewed_at = Column(DateTime(timezone=True))
    review_comments = Column(Text)
    days_requested = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    employee = relationship("Employee", back_populates="leave_requests", foreign_keys=[employee_id])
    reviewer = relationship("Employee", back_populates="reviewed_leave_requests", foreign_keys=[reviewed_by])
