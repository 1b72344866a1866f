"""
Employee management API routes. Administrators only.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from workforce.repository import Repository, get_repository
from workforce.schemas.employee import EmployeeAdminUpdate, EmployeeCreate, EmployeeResponse
from workforce.services.employee_service import EmployeeService
from workforce.utils.auth import IdentityClaims, get_current_admin

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeResponse], summary="List active employees")
async def list_employees(
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    return EmployeeService(repository).list_employees()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED, summary="Create an employee")
async def create_employee(
    employee_data: EmployeeCreate,
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    """
    Create a new employee.

    - The password is stored as a bcrypt hash and never returned
    - 409 if the email is already registered
    """
    return await run_in_threadpool(EmployeeService(repository).create_employee, employee_data)


@router.get("/{employee_id}", response_model=EmployeeResponse, summary="Get an employee")
async def get_employee(
    employee_id: int,
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    return EmployeeService(repository).get_employee(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse, summary="Update an employee")
async def update_employee(
    employee_id: int,
    update_data: EmployeeAdminUpdate,
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    """
    Update any subset of an employee's fields, including role and leave balance.

    - Unknown fields are rejected
    - A new password is re-hashed
    """
    return await run_in_threadpool(EmployeeService(repository).update_employee, employee_id, update_data)


@router.delete("/{employee_id}", summary="Delete an employee")
async def delete_employee(
    employee_id: int,
    current_admin: IdentityClaims = Depends(get_current_admin),
    repository: Repository = Depends(get_repository),
):
    """
    Delete an employee together with their attendance and leave records.
    """
    EmployeeService(repository).delete_employee(employee_id)
    return {"message": "Employee deleted successfully"}
