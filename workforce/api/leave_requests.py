"""
Leave request API routes: submission, listing and review.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from workforce.repository import Repository, get_repository
from workforce.schemas.leave import (
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveRequestWithEmployee,
    LeaveStatusUpdate,
)
from workforce.services.leave_service import LeaveService
from workforce.utils.auth import IdentityClaims, get_current_admin, get_current_employee

router = APIRouter(prefix="/leave-requests", tags=["leave-requests"])


@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED, summary="Request leave")
async def submit_leave_request(
    request_data: LeaveRequestCreate,
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    """
    Submit a leave request for the caller.

    - The request starts pending
    - Days requested counts both the start and the end date
    """
    return LeaveService(repository).submit(
        claims.employee_id,
        leave_type=request_data.leave_type,
        start_date=request_data.start_date,
        end_date=request_data.end_date,
        reason=request_data.reason,
    )


@router.get("/my", response_model=List[LeaveRequestResponse], summary="List my leave requests")
async def list_my_leave_requests(
    claims: IdentityClaims = Depends(get_current_employee),
    repository: Repository = Depends(get_repository),
):
    return LeaveService(repository).list_mine(claims.employee_id)


@router.get("/pending", response_model=List[LeaveRequestWithEmployee], summary="List pending leave requests")
async def list_pending_leave_requests(
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    return LeaveService(repository).list_pending()


@router.put("/{request_id}/status", response_model=LeaveRequestResponse, summary="Approve or reject a leave request")
async def decide_leave_request(
    request_id: int,
    decision: LeaveStatusUpdate,
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    """
    Approve or reject a pending leave request.

    - 409 if the request was already decided
    - The employee's leave balance is not adjusted
    """
    return LeaveService(repository).decide(
        request_id,
        reviewer_id=current_admin.employee_id,
        decision=decision.status,
        comments=decision.review_comments,
    )
