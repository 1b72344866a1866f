from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from workforce.config import settings
from workforce.enums import Role
from workforce.schemas.types import UtcDateTime


class EmployeeBase(BaseModel):
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    department: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., min_length=1, max_length=100)
    role: Role = Role.EMPLOYEE
    leave_balance: int = settings.DEFAULT_LEAVE_BALANCE
    is_active: bool = True


class EmployeeCreate(EmployeeBase):
    password: str = Field(..., min_length=6)

    class Config:
        extra = "forbid"


class EmployeeAdminUpdate(BaseModel):
    """Fields an administrator may change on any employee."""

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[Role] = None
    leave_balance: Optional[int] = None
    is_active: Optional[bool] = None

    class Config:
        extra = "forbid"


class EmployeeSelfUpdate(BaseModel):
    """Fields an employee may change on their own profile."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=6)

    class Config:
        extra = "forbid"


class EmployeeResponse(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    department: str
    position: str
    role: Role
    leave_balance: int
    is_active: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        from_attributes = True
