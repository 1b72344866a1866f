"""
Leave request workflow.

A request is created Pending and is decided exactly once, by an
administrator, to Approved or Rejected. Decided requests are never changed
again. Leave balance is informational: it is neither checked on submission
nor decremented on approval.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from workforce.enums import LeaveDecision, LeaveStatus, LeaveType, Role
from workforce.exceptions import AlreadyDecided, Forbidden, InvalidDateRange, NotFound
from workforce.models.leave import LeaveRequest
from workforce.repository import Repository
from workforce.utils.datetime_utils import ensure_utc, inclusive_day_count, utc_now

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave request submission and review."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def submit(
        self,
        employee_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        """
        Submit a new leave request in the pending state.

        Args:
            employee_id: Requesting employee
            leave_type: Kind of leave
            start_date: First day of leave
            end_date: Last day of leave (inclusive)
            reason: Optional free-text reason
            now: Submission time (defaults to now)

        Returns:
            The created request

        Raises:
            InvalidDateRange: If end_date is before start_date
            NotFound: If the employee does not exist
        """
        if end_date < start_date:
            raise InvalidDateRange()

        if self.repository.get_employee(employee_id) is None:
            raise NotFound("Employee not found")

        now = ensure_utc(now) if now is not None else utc_now()
        days_requested = inclusive_day_count(start_date, end_date)

        request = self.repository.create_leave_request(
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            days_requested=days_requested,
            created_at=now,
            updated_at=now,
        )

        logger.info(
            f"Employee {employee_id} requested {days_requested} day(s) of {leave_type.value} leave "
            f"from {start_date} to {end_date}"
        )
        return request

    def list_mine(self, employee_id: int) -> List[LeaveRequest]:
        """The employee's own requests, newest first."""
        return self.repository.list_leave_requests_for_employee(employee_id)

    def list_pending(self) -> List[LeaveRequest]:
        """The review queue: pending requests with their requesters, newest first."""
        return self.repository.list_leave_requests_by_status(LeaveStatus.PENDING)

    def decide(
        self,
        request_id: int,
        reviewer_id: int,
        decision: LeaveDecision,
        comments: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        """
        Approve or reject a pending request.

        Args:
            request_id: Request to decide
            reviewer_id: Administrator making the decision
            decision: Approved or rejected
            comments: Optional review comments
            now: Decision time (defaults to now)

        Returns:
            The decided request

        Raises:
            Forbidden: If the reviewer is not currently an administrator
            NotFound: If the request does not exist
            AlreadyDecided: If the request is no longer pending
        """
        reviewer = self.repository.get_employee(reviewer_id)
        if reviewer is None or reviewer.role != Role.ADMIN:
            raise Forbidden("Reviewer must be an administrator")

        request = self.repository.get_leave_request(request_id)
        if request is None:
            raise NotFound("Leave request not found")

        if request.status.is_terminal:
            raise AlreadyDecided()

        now = ensure_utc(now) if now is not None else utc_now()
        status = decision.to_status()

        decided = self.repository.decide_leave_request(
            request_id,
            status=status,
            reviewer_id=reviewer_id,
            review_comments=comments,
            decided_at=now,
        )
        if decided is None:
            # Another reviewer decided it between the read and the update.
            raise AlreadyDecided()

        logger.info(f"Leave request {request_id} {status.value} by employee {reviewer_id}")
        return decided
