from .employee import (
    EmployeeBase,
    EmployeeCreate,
    EmployeeAdminUpdate,
    EmployeeSelfUpdate,
    EmployeeResponse,
)
from .attendance import AttendanceResponse, AttendanceWithEmployee
from .leave import (
    LeaveRequestCreate,
    LeaveStatusUpdate,
    LeaveRequestResponse,
    LeaveRequestWithEmployee,
)
from .auth import LoginRequest, LoginResponse
from .dashboard import DashboardStats

__all__ = [
    "EmployeeBase", "EmployeeCreate", "EmployeeAdminUpdate", "EmployeeSelfUpdate", "EmployeeResponse",
    "AttendanceResponse", "AttendanceWithEmployee",
    "LeaveRequestCreate", "LeaveStatusUpdate", "LeaveRequestResponse", "LeaveRequestWithEmployee",
    "LoginRequest", "LoginResponse",
    "DashboardStats",
]
