from .employee import Employee
from .attendance import AttendanceRecord
from .leave import LeaveRequest

__all__ = ["Employee", "AttendanceRecord", "LeaveRequest"]
