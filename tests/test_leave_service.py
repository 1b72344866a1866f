from datetime import date, datetime, timedelta

import pytest
import pytz

from workforce.enums import LeaveDecision, LeaveStatus, LeaveType
from workforce.exceptions import AlreadyDecided, Forbidden, InvalidDateRange, NotFound
from workforce.services.leave_service import LeaveService

SUBMITTED = datetime(2024, 1, 2, 10, 0, 0, tzinfo=pytz.UTC)


@pytest.fixture
def service(repository):
    return LeaveService(repository)


@pytest.fixture
def pending(service, employee):
    return service.submit(
        employee.id,
        leave_type=LeaveType.VACATION,
        start_date=date(2024, 1, 10),
        end_date=date(2024, 1, 12),
        reason="Family trip",
        now=SUBMITTED,
    )


def test_submit_creates_pending_request(pending, employee):
    assert pending.employee_id == employee.id
    assert pending.status == LeaveStatus.PENDING
    assert pending.reviewed_by is None
    assert pending.reviewed_at is None
    assert pending.review_comments is None


def test_days_requested_counts_both_ends(pending):
    assert pending.days_requested == 3


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2024, 1, 10), date(2024, 1, 10), 1),
        (date(2024, 2, 28), date(2024, 3, 1), 3),
        (date(2023, 12, 30), date(2024, 1, 2), 4),
    ],
)
def test_days_requested_examples(service, employee, start, end, expected):
    request = service.submit(employee.id, LeaveType.SICK, start, end)

    assert request.days_requested == expected


@pytest.mark.parametrize("leave_type", list(LeaveType))
@pytest.mark.parametrize("reason", [None, "Something came up"])
def test_end_before_start_is_rejected(service, repository, employee, leave_type, reason):
    with pytest.raises(InvalidDateRange):
        service.submit(employee.id, leave_type, date(2024, 1, 12), date(2024, 1, 10), reason=reason)

    assert repository.list_leave_requests_for_employee(employee.id) == []


def test_submit_for_unknown_employee(service):
    with pytest.raises(NotFound):
        service.submit(9999, LeaveType.SICK, date(2024, 1, 10), date(2024, 1, 10))


def test_balance_is_not_checked_on_submission(service, employee):
    request = service.submit(employee.id, LeaveType.VACATION, date(2024, 1, 1), date(2024, 3, 31))

    assert request.days_requested > employee.leave_balance
    assert request.status == LeaveStatus.PENDING


def test_list_mine_is_newest_first_and_own_only(service, employee, make_employee):
    other = make_employee()
    older = service.submit(employee.id, LeaveType.SICK, date(2024, 1, 3), date(2024, 1, 3), now=SUBMITTED)
    newer = service.submit(
        employee.id, LeaveType.PERSONAL, date(2024, 1, 5), date(2024, 1, 5), now=SUBMITTED + timedelta(hours=1)
    )
    service.submit(other.id, LeaveType.SICK, date(2024, 1, 3), date(2024, 1, 3), now=SUBMITTED)

    assert [r.id for r in service.list_mine(employee.id)] == [newer.id, older.id]


def test_list_pending_excludes_decided(service, admin, employee, pending):
    later = service.submit(
        employee.id, LeaveType.SICK, date(2024, 2, 1), date(2024, 2, 1), now=SUBMITTED + timedelta(days=1)
    )
    decided = service.submit(
        employee.id, LeaveType.SICK, date(2024, 3, 1), date(2024, 3, 1), now=SUBMITTED + timedelta(days=2)
    )
    service.decide(decided.id, admin.id, LeaveDecision.REJECTED)

    queue = service.list_pending()

    assert [r.id for r in queue] == [later.id, pending.id]
    assert queue[0].employee.email == "alice@example.com"


def test_approve_records_reviewer(service, admin, pending):
    decided_at = SUBMITTED + timedelta(days=1)

    request = service.decide(pending.id, admin.id, LeaveDecision.APPROVED, comments="ok", now=decided_at)

    assert request.status == LeaveStatus.APPROVED
    assert request.reviewed_by == admin.id
    assert request.review_comments == "ok"
    assert request.reviewed_at is not None
    assert request.updated_at is not None


def test_reject_without_comments(service, admin, pending):
    request = service.decide(pending.id, admin.id, LeaveDecision.REJECTED)

    assert request.status == LeaveStatus.REJECTED
    assert request.review_comments is None


@pytest.mark.parametrize("first", list(LeaveDecision))
@pytest.mark.parametrize("second", list(LeaveDecision))
def test_decided_request_cannot_be_decided_again(service, repository, admin, make_employee, pending, first, second):
    other_admin = make_employee(role=admin.role)
    service.decide(pending.id, admin.id, first, comments="first")
    before = repository.get_leave_request(pending.id)
    snapshot = (before.status, before.reviewed_by, before.review_comments, before.reviewed_at)

    with pytest.raises(AlreadyDecided):
        service.decide(pending.id, other_admin.id, second, comments="second")

    after = repository.get_leave_request(pending.id)
    assert (after.status, after.reviewed_by, after.review_comments, after.reviewed_at) == snapshot


@pytest.mark.parametrize(
    "status, terminal",
    [(LeaveStatus.PENDING, False), (LeaveStatus.APPROVED, True), (LeaveStatus.REJECTED, True)],
)
def test_only_pending_is_open_for_review(status, terminal):
    assert status.is_terminal is terminal


def test_decide_unknown_request(service, admin):
    with pytest.raises(NotFound):
        service.decide(9999, admin.id, LeaveDecision.APPROVED)


def test_reviewer_must_currently_be_admin(service, employee, pending):
    with pytest.raises(Forbidden):
        service.decide(pending.id, employee.id, LeaveDecision.APPROVED)


def test_losing_a_concurrent_decision_reports_already_decided(service, repository, admin, pending, monkeypatch):
    monkeypatch.setattr(repository, "decide_leave_request", lambda *args, **kwargs: None)

    with pytest.raises(AlreadyDecided):
        service.decide(pending.id, admin.id, LeaveDecision.APPROVED)


def test_conditional_update_only_matches_pending_rows(repository, admin, pending):
    first = repository.decide_leave_request(pending.id, LeaveStatus.APPROVED, admin.id, "ok", SUBMITTED)
    second = repository.decide_leave_request(pending.id, LeaveStatus.REJECTED, admin.id, "no", SUBMITTED)

    assert first is not None and first.status == LeaveStatus.APPROVED
    assert second is None


def test_approval_does_not_change_leave_balance(service, repository, admin, employee, pending):
    service.decide(pending.id, admin.id, LeaveDecision.APPROVED)

    assert repository.get_employee(employee.id).leave_balance == 20
