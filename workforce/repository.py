"""
Storage layer: every read and write the services perform goes through here.
"""

from datetime import date, datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import distinct, func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from workforce.database import get_db
from workforce.enums import AttendanceStatus, LeaveStatus
from workforce.models.attendance import AttendanceRecord
from workforce.models.employee import Employee
from workforce.models.leave import LeaveRequest


class DuplicateRecordError(Exception):
    """Raised when a write violates a uniqueness constraint."""


# SQLSTATE for unique_violation on PostgreSQL
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True for duplicate-key failures, False for foreign-key, NOT NULL and CHECK failures."""
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite: "UNIQUE constraint failed: ..."
    return "unique constraint" in str(error.orig).lower()


class Repository:
    """SQLAlchemy-backed storage for employees, attendance and leave requests."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise DuplicateRecordError(str(e.orig)) from e
            raise
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _insert(self, instance):
        self.db.add(instance)
        self._commit()
        self.db.refresh(instance)
        return instance

    # Employees

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.email == email).first()

    def create_employee(self, **fields) -> Employee:
        """
        Insert a new employee.

        Raises:
            DuplicateRecordError: If the email is already registered
        """
        return self._insert(Employee(**fields))

    def update_employee(self, employee_id: int, fields: dict) -> Optional[Employee]:
        """
        Apply a partial update.

        Raises:
            DuplicateRecordError: If the update collides with another email
        """
        employee = self.get_employee(employee_id)
        if employee is None:
            return None

        for field, value in fields.items():
            setattr(employee, field, value)

        self._commit()
        self.db.refresh(employee)
        return employee

    def delete_employee(self, employee_id: int) -> bool:
        """Delete an employee together with their attendance and leave records."""
        employee = self.get_employee(employee_id)
        if employee is None:
            return False

        self.db.delete(employee)
        self._commit()
        return True

    def list_active_employees(self) -> List[Employee]:
        return (
            self.db.query(Employee)
            .filter(Employee.is_active.is_(True))
            .order_by(Employee.last_name, Employee.first_name, Employee.id)
            .all()
        )

    # Attendance

    def create_attendance(self, **fields) -> AttendanceRecord:
        """
        Insert an attendance record.

        Raises:
            DuplicateRecordError: If the employee already has a record for that day
        """
        return self._insert(AttendanceRecord(**fields))

    def get_attendance(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(
                AttendanceRecord.employee_id == employee_id,
                AttendanceRecord.work_date == work_date,
            )
            .first()
        )

    def list_attendance_for_date(self, work_date: date) -> List[AttendanceRecord]:
        """All records for a day, with the owning employee loaded."""
        return (
            self.db.query(AttendanceRecord)
            .options(joinedload(AttendanceRecord.employee))
            .filter(AttendanceRecord.work_date == work_date)
            .order_by(AttendanceRecord.check_in_time)
            .all()
        )

    def update_attendance(self, record_id: int, fields: dict) -> Optional[AttendanceRecord]:
        record = self.db.get(AttendanceRecord, record_id)
        if record is None:
            return None

        for field, value in fields.items():
            setattr(record, field, value)

        self._commit()
        self.db.refresh(record)
        return record

    # Leave requests

    def create_leave_request(self, **fields) -> LeaveRequest:
        return self._insert(LeaveRequest(**fields))

    def get_leave_request(self, request_id: int) -> Optional[LeaveRequest]:
        return self.db.get(LeaveRequest, request_id)

    def list_leave_requests_for_employee(self, employee_id: int) -> List[LeaveRequest]:
        """An employee's requests, newest first."""
        return (
            self.db.query(LeaveRequest)
            .filter(LeaveRequest.employee_id == employee_id)
            .order_by(LeaveRequest.created_at.desc())
            .all()
        )

    def list_leave_requests_by_status(self, status: LeaveStatus) -> List[LeaveRequest]:
        """Requests in ``status``, newest first, with the requester loaded."""
        return (
            self.db.query(LeaveRequest)
            .options(joinedload(LeaveRequest.employee))
            .filter(LeaveRequest.status == status)
            .order_by(LeaveRequest.created_at.desc())
            .all()
        )

    def decide_leave_request(
        self,
        request_id: int,
        status: LeaveStatus,
        reviewer_id: int,
        review_comments: Optional[str],
        decided_at: datetime,
    ) -> Optional[LeaveRequest]:
        """
        Move a pending request to ``status``.

        The update only matches while the row is still pending, so of two
        concurrent decisions exactly one succeeds.

        Returns:
            The updated request, or None if no pending request matched
        """
        result = self.db.execute(
            update(LeaveRequest)
            .where(
                LeaveRequest.id == request_id,
                LeaveRequest.status == LeaveStatus.PENDING,
            )
            .values(
                status=status,
                reviewed_by=reviewer_id,
                reviewed_at=decided_at,
                review_comments=review_comments,
                updated_at=decided_at,
            )
            .execution_options(synchronize_session=False)
        )
        self._commit()

        if result.rowcount == 0:
            return None

        request = self.get_leave_request(request_id)
        self.db.refresh(request)
        return request

    # Aggregates

    def count_active_employees(self) -> int:
        return self.db.query(func.count(Employee.id)).filter(Employee.is_active.is_(True)).scalar() or 0

    def count_present_on(self, work_date: date) -> int:
        return (
            self.db.query(func.count(AttendanceRecord.id))
            .filter(
                AttendanceRecord.work_date == work_date,
                AttendanceRecord.status == AttendanceStatus.PRESENT,
            )
            .scalar()
            or 0
        )

    def count_pending_leave_requests(self) -> int:
        return (
            self.db.query(func.count(LeaveRequest.id))
            .filter(LeaveRequest.status == LeaveStatus.PENDING)
            .scalar()
            or 0
        )

    def count_active_departments(self) -> int:
        return (
            self.db.query(func.count(distinct(Employee.department)))
            .filter(Employee.is_active.is_(True))
            .scalar()
            or 0
        )


def get_repository(db: Session = Depends(get_db)) -> Repository:
    return Repository(db)
