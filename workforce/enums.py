from enum import Enum


class Role(str, Enum):
    EMPLOYEE = "employee"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    ON_BREAK = "on_break"


class LeaveType(str, Enum):
    SICK = "sick"
    VACATION = "vacation"
    PERSONAL = "personal"
    EMERGENCY = "emergency"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not LeaveStatus.PENDING


class LeaveDecision(str, Enum):
    """The two outcomes a reviewer may choose for a pending request."""

    APPROVED = "approved"
    REJECTED = "rejected"

    def to_status(self) -> LeaveStatus:
        if self is LeaveDecision.APPROVED:
            return LeaveStatus.APPROVED
        if self is LeaveDecision.REJECTED:
            return LeaveStatus.REJECTED
        raise ValueError(f"Unhandled leave decision: {self!r}")


def enum_values(enum_cls) -> list:
    """Persist enum members by value rather than by name."""
    return [member.value for member in enum_cls]
