from datetime import date, datetime, timedelta

import pytest
import pytz
from sqlalchemy.exc import IntegrityError

from workforce.enums import AttendanceStatus
from workforce.exceptions import (
    AlreadyCheckedInToday,
    AlreadyCheckedOutToday,
    InvalidInput,
    NoCheckInFound,
    NotFound,
)
from workforce.repository import DuplicateRecordError
from workforce.services.attendance_service import AttendanceService

MORNING = datetime(2024, 1, 10, 9, 0, 0, tzinfo=pytz.UTC)


@pytest.fixture
def service(repository):
    return AttendanceService(repository)


def test_check_in_creates_present_record(service, employee):
    record = service.check_in(employee.id, now=MORNING)

    assert record.employee_id == employee.id
    assert record.work_date == date(2024, 1, 10)
    assert record.status == AttendanceStatus.PRESENT
    assert record.hours_worked == 0
    assert record.check_out_time is None


def test_second_check_in_same_day_fails_and_leaves_record_unchanged(service, repository, employee):
    first = service.check_in(employee.id, now=MORNING)
    snapshot = (first.id, first.check_in_time, first.check_out_time, first.hours_worked)

    with pytest.raises(AlreadyCheckedInToday):
        service.check_in(employee.id, now=MORNING + timedelta(hours=2))

    repository.db.expire_all()
    stored = service.get_today_for_employee(employee.id, now=MORNING)
    assert (stored.id, stored.check_in_time, stored.check_out_time, stored.hours_worked) == snapshot


def test_check_in_after_check_out_same_day_fails(service, employee):
    service.check_in(employee.id, now=MORNING)
    service.check_out(employee.id, now=MORNING + timedelta(hours=8))

    with pytest.raises(AlreadyCheckedInToday):
        service.check_in(employee.id, now=MORNING + timedelta(hours=9))


def test_check_in_next_day_is_a_new_record(service, employee):
    first = service.check_in(employee.id, now=MORNING)
    second = service.check_in(employee.id, now=MORNING + timedelta(days=1))

    assert second.id != first.id
    assert second.work_date == date(2024, 1, 11)


def test_check_in_unknown_employee(service):
    with pytest.raises(NotFound):
        service.check_in(9999, now=MORNING)


def test_concurrent_insert_is_reported_as_already_checked_in(service, repository, employee, monkeypatch):
    def lost_race(**fields):
        raise DuplicateRecordError("UNIQUE constraint failed")

    monkeypatch.setattr(repository, "get_attendance", lambda employee_id, work_date: None)
    monkeypatch.setattr(repository, "create_attendance", lost_race)

    with pytest.raises(AlreadyCheckedInToday):
        service.check_in(employee.id, now=MORNING)


def test_missing_employee_on_insert_is_not_reported_as_checked_in(service, repository, employee, monkeypatch):
    # The employee vanishes between the existence check and the insert.
    monkeypatch.setattr(repository, "get_employee", lambda employee_id: employee)

    with pytest.raises(IntegrityError):
        service.check_in(424242, now=MORNING)


def test_storage_rejects_second_record_for_same_day(repository, employee):
    repository.create_attendance(employee_id=employee.id, work_date=date(2024, 1, 10), check_in_time=MORNING)

    with pytest.raises(DuplicateRecordError):
        repository.create_attendance(employee_id=employee.id, work_date=date(2024, 1, 10), check_in_time=MORNING)


def test_check_out_without_check_in(service, employee):
    with pytest.raises(NoCheckInFound):
        service.check_out(employee.id, now=MORNING)


def test_check_out_computes_hours_worked(service, employee):
    service.check_in(employee.id, now=MORNING)

    record = service.check_out(employee.id, now=datetime(2024, 1, 10, 17, 30, 0, tzinfo=pytz.UTC))

    assert record.hours_worked == 8.5
    assert record.check_out_time is not None


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(hours=8, minutes=3), 8.1),
        (timedelta(hours=8, minutes=2, seconds=59), 8.0),
        (timedelta(minutes=0), 0.0),
        (timedelta(hours=10, minutes=57), 11.0),
    ],
)
def test_hours_worked_rounds_half_up_to_one_decimal(service, employee, elapsed, expected):
    service.check_in(employee.id, now=MORNING)

    record = service.check_out(employee.id, now=MORNING + elapsed)

    assert record.hours_worked == expected


def test_second_check_out_fails_and_keeps_first(service, employee):
    service.check_in(employee.id, now=MORNING)
    first = service.check_out(employee.id, now=MORNING + timedelta(hours=8))

    with pytest.raises(AlreadyCheckedOutToday):
        service.check_out(employee.id, now=MORNING + timedelta(hours=9))

    stored = service.get_today_for_employee(employee.id, now=MORNING)
    assert stored.hours_worked == first.hours_worked == 8.0
    assert stored.is_checked_out


def test_check_out_before_check_in_time_is_rejected(service, employee):
    service.check_in(employee.id, now=MORNING)

    with pytest.raises(InvalidInput):
        service.check_out(employee.id, now=MORNING - timedelta(minutes=5))


def test_day_boundary_follows_business_timezone(repository, employee):
    service = AttendanceService(repository, timezone="America/New_York")

    # 03:00 UTC on the 10th is still the evening of the 9th in New York.
    late = service.check_in(employee.id, now=datetime(2024, 1, 10, 3, 0, tzinfo=pytz.UTC))
    early = service.check_in(employee.id, now=datetime(2024, 1, 10, 14, 0, tzinfo=pytz.UTC))

    assert late.work_date == date(2024, 1, 9)
    assert early.work_date == date(2024, 1, 10)


def test_get_today_for_employee_returns_none_without_record(service, employee):
    assert service.get_today_for_employee(employee.id, now=MORNING) is None


def test_get_today_all_includes_employee(service, make_employee):
    first = make_employee()
    second = make_employee()
    service.check_in(first.id, now=MORNING)
    service.check_in(second.id, now=MORNING + timedelta(minutes=5))
    service.check_in(first.id, now=MORNING - timedelta(days=1))

    records = service.get_today_all(now=MORNING)

    assert [record.employee.id for record in records] == [first.id, second.id]
    assert all(record.work_date == date(2024, 1, 10) for record in records)
