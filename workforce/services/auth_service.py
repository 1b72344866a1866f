"""
Login: credential verification and session token issuance.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from workforce.exceptions import InvalidCredentials
from workforce.models.employee import Employee
from workforce.repository import Repository
from workforce.utils.auth import (
    IdentityClaims,
    burn_password_check,
    create_access_token,
    verify_password,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Credential verification and token issuance."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def authenticate(self, email: str, password: str, now: Optional[datetime] = None) -> Tuple[str, Employee]:
        """
        Verify an email/password pair and issue a session token.

        Args:
            email: Login email
            password: Plaintext password as presented
            now: Issuance time (defaults to now)

        Returns:
            The signed token and the authenticated employee

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong;
                the two causes are not distinguished
        """
        employee = self.repository.get_employee_by_email(email)

        if employee is None:
            burn_password_check()
            logger.warning("Rejected login attempt")
            raise InvalidCredentials()

        if not verify_password(password, employee.password_hash):
            logger.warning("Rejected login attempt")
            raise InvalidCredentials()

        token = create_access_token(
            IdentityClaims(employee_id=employee.id, email=employee.email, role=employee.role),
            issued_at=now,
        )

        logger.info(f"Employee {employee.id} logged in")
        return token, employee
