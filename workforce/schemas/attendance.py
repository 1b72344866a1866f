from datetime import date
from typing import Optional

from pydantic import BaseModel

from workforce.enums import AttendanceStatus
from workforce.schemas.employee import EmployeeResponse
from workforce.schemas.types import UtcDateTime


class AttendanceResponse(BaseModel):
    id: int
    employee_id: int
    work_date: date
    check_in_time: Optional[UtcDateTime] = None
    check_out_time: Optional[UtcDateTime] = None
    hours_worked: float
    status: AttendanceStatus
    created_at: UtcDateTime

    class Config:
        from_attributes = True


class AttendanceWithEmployee(AttendanceResponse):
    employee: EmployeeResponse
