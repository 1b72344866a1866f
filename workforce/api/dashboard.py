"""
Dashboard API routes. Administrators only.
"""

from fastapi import APIRouter, Depends

from workforce.repository import Repository, get_repository
from workforce.schemas.dashboard import DashboardStats
from workforce.services.dashboard_service import DashboardService
from workforce.utils.auth import IdentityClaims, get_current_admin

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats, summary="Get dashboard statistics")
async def get_dashboard_stats(
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    """
    Headline counts for the admin dashboard.

    - Active employees, employees present today, pending leave requests,
      and distinct departments among active employees
    """
    return DashboardService(repository).get_stats()
