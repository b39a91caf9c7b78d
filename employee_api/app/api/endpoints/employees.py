"""
Employee endpoints.

These routes expose CRUD operations on employee records.  Each handler
forwards to ``EmployeeService``; the only logic kept here is forcing
creation semantics on POST and turning a missing record into an HTTP
404 response.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from employee_api.app.api.dependencies import EmployeeServiceDep
from employee_api.app.core.exceptions import EmployeeNotFoundError
from employee_api.app.schemas.employee import Employee

router = APIRouter()


def _not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee id not found - {employee_id}",
    )


@router.get("", response_model=List[Employee])
async def list_employees(service: EmployeeServiceDep) -> List[Employee]:
    """Return all employees ordered by id."""
    return await service.find_all()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: int, service: EmployeeServiceDep) -> Employee:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if the employee does not exist.
    """
    employee = await service.find_by_id(employee_id)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(employee: Employee, service: EmployeeServiceDep) -> Employee:
    """Create a new employee.

    Any ``id`` sent by the client is discarded so the store always
    assigns a fresh one.
    """
    employee.id = 0
    return await service.save(employee)


@router.put("", response_model=Employee)
async def update_employee(employee: Employee, service: EmployeeServiceDep) -> Employee:
    """Update an existing employee.

    The record is saved as sent.  Returns HTTP 404 if ``id`` does not
    match a stored employee; an ``id`` of 0 creates a new record.
    """
    try:
        return await service.save(employee)
    except EmployeeNotFoundError as e:
        raise _not_found(e.employee_id)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee(employee_id: int, service: EmployeeServiceDep) -> str:
    """Delete an employee and return a confirmation message.

    Returns HTTP 404 if the employee does not exist.
    """
    if await service.find_by_id(employee_id) is None:
        raise _not_found(employee_id)
    await service.delete_by_id(employee_id)
    return f"Deleted employee id - {employee_id}"
