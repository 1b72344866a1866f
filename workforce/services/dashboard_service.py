"""
Dashboard statistics for administrators.
"""

from datetime import datetime
from typing import Optional

from workforce.repository import Repository
from workforce.schemas.dashboard import DashboardStats
from workforce.utils.datetime_utils import get_today


class DashboardService:
    def __init__(self, repository: Repository, timezone: Optional[str] = None):
        self.repository = repository
        self.timezone = timezone

    def get_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        """
        Headline counts for the admin dashboard.

        The four counts are read independently; under concurrent writes they
        may not describe a single instant.
        """
        today = get_today(self.timezone, now)

        return DashboardStats(
            total_employees=self.repository.count_active_employees(),
            present_today=self.repository.count_present_on(today),
            pending_leaves=self.repository.count_pending_leave_requests(),
            departments=self.repository.count_active_departments(),
        )
