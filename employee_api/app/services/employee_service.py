"""
Service layer for employees.

``EmployeeService`` is a transactional facade: every method opens one
transaction, delegates to the repository exactly once and commits on
return.  Any exception raised by the repository rolls the transaction
back and propagates unchanged to the caller.  There are no business
rules here beyond that.
"""

from __future__ import annotations

from typing import List, Optional

from employee_api.app.core.db import Database
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee


class EmployeeService:
    """Service class for managing employee records."""

    def __init__(self, repository: EmployeeRepository, database: Database) -> None:
        self.repository = repository
        self.database = database

    async def find_all(self) -> List[Employee]:
        with self.database.transaction():
            return self.repository.find_all()

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with self.database.transaction():
            return self.repository.find_by_id(employee_id)

    async def save(self, employee: Employee) -> Employee:
        """Create the employee if its id is 0, update it otherwise."""
        with self.database.transaction():
            return self.repository.save(employee)

    async def delete_by_id(self, employee_id: int) -> None:
        with self.database.transaction():
            self.repository.delete_by_id(employee_id)
