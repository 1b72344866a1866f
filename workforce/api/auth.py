"""
Authentication API routes: login and the caller's own profile.
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from workforce.config import settings
from workforce.repository import Repository, get_repository
from workforce.schemas.auth import LoginRequest, LoginResponse
from workforce.schemas.employee import EmployeeResponse, EmployeeSelfUpdate
from workforce.services.auth_service import AuthService
from workforce.services.employee_service import EmployeeService
from workforce.utils.auth import IdentityClaims, get_current_employee

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=LoginResponse, summary="Log in")
async def login(
    credentials: LoginRequest,
    repository: Repository = Depends(get_repository),
):
    """
    Exchange an email and password for a bearer token.

    - Unknown email and wrong password both answer 401 "Invalid credentials"
    - The token is valid for ACCESS_TOKEN_EXPIRE_MINUTES
    """
    token, employee = await run_in_threadpool(
        AuthService(repository).authenticate, credentials.email, credentials.password
    )

    return LoginResponse(
        token=token,
        expires_in=settings.access_token_expire_seconds,
        employee=EmployeeResponse.model_validate(employee),
    )


@router.get("/me", response_model=EmployeeResponse, summary="Get my profile")
async def get_me(
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    """
    Return the caller's own profile.

    - 404 if the employee was deleted after the token was issued
    """
    return EmployeeService(repository).get_employee(claims.employee_id)


@router.patch("/me", response_model=EmployeeResponse, summary="Update my profile")
async def update_me(
    update_data: EmployeeSelfUpdate,
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    """
    Change the caller's name or password.

    - Any other field is rejected
    """
    return await run_in_threadpool(EmployeeService(repository).update_own_profile, claims.employee_id, update_data)
