"""
Employee management: administrator CRUD and self-service profile edits.
"""

import logging
from typing import List

from workforce.exceptions import EmailAlreadyRegistered, InvalidInput, NotFound
from workforce.models.employee import Employee
from workforce.repository import DuplicateRecordError, Repository
from workforce.schemas.employee import EmployeeAdminUpdate, EmployeeCreate, EmployeeSelfUpdate
from workforce.utils.auth import get_password_hash

logger = logging.getLogger(__name__)


class EmployeeService:
    """Employee record management."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def list_employees(self) -> List[Employee]:
        return self.repository.list_active_employees()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self.repository.get_employee(employee_id)
        if employee is None:
            raise NotFound("Employee not found")
        return employee

    def create_employee(self, employee_data: EmployeeCreate) -> Employee:
        """
        Create a new employee with a hashed password.

        Raises:
            EmailAlreadyRegistered: If the email is already in use
        """
        if self.repository.get_employee_by_email(employee_data.email):
            raise EmailAlreadyRegistered()

        fields = employee_data.model_dump(exclude={"password"})
        fields["password_hash"] = get_password_hash(employee_data.password)

        try:
            employee = self.repository.create_employee(**fields)
        except DuplicateRecordError:
            raise EmailAlreadyRegistered()

        logger.info(f"Created employee {employee.id} ({employee.role.value})")
        return employee

    def update_employee(self, employee_id: int, update_data: EmployeeAdminUpdate) -> Employee:
        """
        Apply an administrator's changes to any employee.

        Raises:
            NotFound: If the employee does not exist
            EmailAlreadyRegistered: If the new email belongs to someone else
        """
        return self._apply_update(employee_id, update_data.model_dump(exclude_unset=True))

    def update_own_profile(self, employee_id: int, update_data: EmployeeSelfUpdate) -> Employee:
        """
        Apply an employee's changes to their own profile.

        Raises:
            NotFound: If the employee does not exist
        """
        return self._apply_update(employee_id, update_data.model_dump(exclude_unset=True))

    def _apply_update(self, employee_id: int, changes: dict) -> Employee:
        for field, value in changes.items():
            if value is None:
                raise InvalidInput(f"{field} may not be null")

        if "password" in changes:
            changes["password_hash"] = get_password_hash(changes.pop("password"))

        try:
            employee = self.repository.update_employee(employee_id, changes)
        except DuplicateRecordError:
            raise EmailAlreadyRegistered()

        if employee is None:
            raise NotFound("Employee not found")

        logger.info(f"Updated employee {employee_id}: {', '.join(sorted(changes)) or 'no changes'}")
        return employee

    def delete_employee(self, employee_id: int) -> None:
        """
        Delete an employee along with their attendance and leave records.

        Raises:
            NotFound: If the employee does not exist
        """
        if not self.repository.delete_employee(employee_id):
            raise NotFound("Employee not found")

        logger.info(f"Deleted employee {employee_id}")
