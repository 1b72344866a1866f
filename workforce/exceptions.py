"""
Domain errors raised by the service layer.

Each error carries a stable ``code`` and the HTTP status it maps to, so the
API layer can render every failure the same way.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for business rule violations."""

    status_code = 400
    code = "domain_error"
    message = "Request could not be completed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(DomainError):
    status_code = 401
    code = "invalid_credentials"
    message = "Invalid credentials"


class Unauthenticated(DomainError):
    status_code = 401
    code = "unauthenticated"
    message = "Access token required in Authorization header as 'Bearer <token>'"


class InvalidOrExpiredToken(DomainError):
    status_code = 403
    code = "invalid_token"
    message = "Invalid or expired token"


class Forbidden(DomainError):
    status_code = 403
    code = "forbidden"
    message = "Insufficient permissions"


class NotFound(DomainError):
    status_code = 404
    code = "not_found"
    message = "Resource not found"


class InvalidInput(DomainError):
    status_code = 400
    code = "invalid_input"
    message = "Invalid request data"


class InvalidDateRange(InvalidInput):
    code = "invalid_date_range"
    message = "End date must not be before start date"


class EmailAlreadyRegistered(DomainError):
    status_code = 409
    code = "email_taken"
    message = "An employee with this email already exists"


class AlreadyCheckedInToday(DomainError):
    code = "already_checked_in"
    message = "Already checked in today"


class NoCheckInFound(DomainError):
    code = "no_check_in"
    message = "No check-in found for today"


class AlreadyCheckedOutToday(DomainError):
    code = "already_checked_out"
    message = "Already checked out today"


class AlreadyDecided(DomainError):
    status_code = 409
    code = "already_decided"
    message = "Leave request has already been reviewed"
