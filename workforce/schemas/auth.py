from pydantic import BaseModel, EmailStr, Field

from workforce.schemas.employee import EmployeeResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
    employee: EmployeeResponse
