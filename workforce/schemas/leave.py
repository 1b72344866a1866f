from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from workforce.enums import LeaveDecision, LeaveStatus, LeaveType
from workforce.schemas.employee import EmployeeResponse
from workforce.schemas.types import UtcDateTime


class LeaveRequestCreate(BaseModel):
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str] = Field(None, max_length=1000)

    class Config:
        extra = "forbid"


class LeaveStatusUpdate(BaseModel):
    status: LeaveDecision
    review_comments: Optional[str] = Field(None, max_length=1000)

    class Config:
        extra = "forbid"


class LeaveRequestResponse(BaseModel):
    id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str] = None
    status: LeaveStatus
    reviewed_by: Optional[int] = None
    reviewed_at: Optional[UtcDateTime] = None
    review_comments: Optional[str] = None
    days_requested: int
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        from_attributes = True


class LeaveRequestWithEmployee(LeaveRequestResponse):
    employee: EmployeeResponse
