"""
Attendance API routes: check in, check out and today's records.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from workforce.repository import Repository, get_repository
from workforce.schemas.attendance import AttendanceResponse, AttendanceWithEmployee
from workforce.services.attendance_service import AttendanceService
from workforce.utils.auth import IdentityClaims, get_current_admin, get_current_employee

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.post("/checkin", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED, summary="Check in")
async def check_in(
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    """
    Check the caller in for today.

    - Only one check-in per calendar day
    """
    return AttendanceService(repository).check_in(claims.employee_id)


@router.post("/checkout", response_model=AttendanceResponse, summary="Check out")
async def check_out(
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    """
    Check the caller out for today and record hours worked.

    - Requires a check-in earlier the same day
    - Only one check-out per calendar day
    """
    return AttendanceService(repository).check_out(claims.employee_id)


@router.get("/my", response_model=Optional[AttendanceResponse], summary="Get my attendance for today")
async def get_my_attendance(
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    return AttendanceService(repository).get_today_for_employee(claims.employee_id)


@router.get("/today", response_model=List[AttendanceWithEmployee], summary="Get everyone's attendance for today")
async def get_today_attendance(
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    return AttendanceService(repository).get_today_all()
