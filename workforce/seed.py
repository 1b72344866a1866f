"""
Create the first administrator account.

    python -m workforce.seed --email admin@example.com --password changeme
"""

import argparse
import logging
import logging.config
from typing import Optional, Sequence, Tuple

from workforce.config import settings
from workforce.database import SessionLocal, init_db
from workforce.enums import Role
from workforce.models.employee import Employee
from workforce.repository import Repository
from workforce.schemas.employee import EmployeeCreate
from workforce.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


def seed_admin(
    repository: Repository,
    email: str,
    password: str,
    first_name: str = "System",
    last_name: str = "Administrator",
    department: str = "Administration",
    position: str = "Administrator",
) -> Tuple[Employee, bool]:
    """
    Ensure an administrator with ``email`` exists.

    Returns:
        The employee holding ``email`` and whether it was created by this call.
        An existing employee is returned unchanged, whatever its role.
    """
    existing = repository.get_employee_by_email(email)
    if existing is not None:
        if existing.role is not Role.ADMIN:
            logger.warning(f"Employee {existing.id} already uses {email} but is not an administrator")
        else:
            logger.info(f"Administrator {existing.id} already registered with that email, nothing to seed")
        return existing, False

    admin = EmployeeService(repository).create_employee(
        EmployeeCreate(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            department=department,
            position=position,
            role=Role.ADMIN,
        )
    )
    return admin, True


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the initial administrator account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--first-name", default="System")
    parser.add_argument("--last-name", default="Administrator")
    parser.add_argument("--department", default="Administration")
    parser.add_argument("--position", default="Administrator")
    args = parser.parse_args(argv)

    logging.config.dictConfig(settings.get_logging_config())
    init_db()

    db = SessionLocal()
    try:
        admin, created = seed_admin(
            Repository(db),
            email=args.email,
            password=args.password,
            first_name=args.first_name,
            last_name=args.last_name,
            department=args.department,
            position=args.position,
        )
        if admin.role is not Role.ADMIN:
            logger.error(f"{admin.email} belongs to {admin.full_name}, who is not an administrator")
            return 1
        logger.info(f"Administrator {admin.full_name} <{admin.email}> {'created' if created else 'already present'}")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
