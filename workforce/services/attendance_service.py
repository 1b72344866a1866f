"""
Attendance service: the daily check-in / check-out cycle.

Each employee moves through NotCheckedIn -> CheckedIn -> CheckedOut once per
calendar day. Days are split at midnight in the configured business timezone.
"""

import logging
from datetime import datetime
from typing import List, Optional

from workforce.enums import AttendanceStatus
from workforce.exceptions import (
    AlreadyCheckedInToday,
    AlreadyCheckedOutToday,
    InvalidInput,
    NoCheckInFound,
    NotFound,
)
from workforce.models.attendance import AttendanceRecord
from workforce.repository import DuplicateRecordError, Repository
from workforce.utils.datetime_utils import business_date, ensure_utc, hours_between, utc_now

logger = logging.getLogger(__name__)


class AttendanceService:
    """Daily attendance lifecycle."""

    def __init__(self, repository: Repository, timezone: Optional[str] = None):
        self.repository = repository
        self.timezone = timezone

    def _resolve(self, now: Optional[datetime]):
        now = ensure_utc(now) if now is not None else utc_now()
        return now, business_date(now, self.timezone)

    def check_in(self, employee_id: int, now: Optional[datetime] = None) -> AttendanceRecord:
        """
        Record the employee's arrival for today.

        Args:
            employee_id: Employee checking in
            now: Check-in time (defaults to now)

        Returns:
            The new attendance record

        Raises:
            NotFound: If the employee does not exist
            AlreadyCheckedInToday: If a record already exists for today,
                whether or not it has been checked out
        """
        now, today = self._resolve(now)

        if self.repository.get_employee(employee_id) is None:
            raise NotFound("Employee not found")

        if self.repository.get_attendance(employee_id, today) is not None:
            raise AlreadyCheckedInToday()

        try:
            record = self.repository.create_attendance(
                employee_id=employee_id,
                work_date=today,
                check_in_time=now,
                hours_worked=0.0,
                status=AttendanceStatus.PRESENT,
                created_at=now,
            )
        except DuplicateRecordError:
            # A concurrent check-in won the insert.
            logger.warning(f"Concurrent check-in detected for employee {employee_id} on {today}")
            raise AlreadyCheckedInToday()

        logger.info(f"Employee {employee_id} checked in for {today}")
        return record

    def check_out(self, employee_id: int, now: Optional[datetime] = None) -> AttendanceRecord:
        """
        Record the employee's departure and compute hours worked.

        Raises:
            NoCheckInFound: If there is no record for today
            AlreadyCheckedOutToday: If today's record is already checked out
            InvalidInput: If the check-out time precedes the check-in time
        """
        now, today = self._resolve(now)

        record = self.repository.get_attendance(employee_id, today)
        if record is None:
            raise NoCheckInFound()

        if record.is_checked_out:
            raise AlreadyCheckedOutToday()

        hours_worked = 0.0
        if record.check_in_time is not None:
            check_in_time = ensure_utc(record.check_in_time)
            if now < check_in_time:
                raise InvalidInput("Check-out time precedes check-in time")
            hours_worked = hours_between(check_in_time, now)

        updated = self.repository.update_attendance(
            record.id,
            {"check_out_time": now, "hours_worked": hours_worked},
        )

        logger.info(f"Employee {employee_id} checked out for {today} after {hours_worked}h")
        return updated

    def get_today_for_employee(self, employee_id: int, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        """Today's record for the employee, or None."""
        _, today = self._resolve(now)
        return self.repository.get_attendance(employee_id, today)

    def get_today_all(self, now: Optional[datetime] = None) -> List[AttendanceRecord]:
        """Today's records for every employee, each with its employee loaded."""
        _, today = self._resolve(now)
        return self.repository.list_attendance_for_date(today)
