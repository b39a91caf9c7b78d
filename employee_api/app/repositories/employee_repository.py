"""
Employee repository.

``EmployeeRepository`` is the interface the service layer depends on:
any object with these four methods satisfies it, no inheritance
needed.  ``SQLiteEmployeeRepository`` implements it on top of the
``employee`` table.

The repository does not manage transactions.  Every method runs on the
connection of the transaction opened by the caller (see
``Database.transaction``).  All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Protocol, runtime_checkable

from employee_api.app.core.db import Database
from employee_api.app.core.exceptions import EmployeeNotFoundError, RecordStoreError
from employee_api.app.schemas.employee import Employee


logger = logging.getLogger(__name__)

# Range of a signed 64-bit SQLite INTEGER; no row can have an id outside it.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def _is_storable_id(employee_id: int) -> bool:
    return SQLITE_INTEGER_MIN <= employee_id <= SQLITE_INTEGER_MAX


@runtime_checkable
class EmployeeRepository(Protocol):
    """Protocol for employee record stores."""

    def find_all(self) -> List[Employee]:
        """Return every stored employee; an empty list if there are none."""
        ...

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""
        ...

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee (id 0) or update an existing one.

        The resulting id is assigned back onto ``employee``, which is
        returned.
        """
        ...

    def delete_by_id(self, employee_id: int) -> None:
        """Delete the employee if present; a missing id is a no-op."""
        ...


class SQLiteEmployeeRepository:
    """Employee repository backed by the SQLite ``employee`` table."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_all(self) -> List[Employee]:
        rows = self._execute("SELECT * FROM employee ORDER BY id ASC").fetchall()
        return [Employee.from_row(row) for row in rows]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if not _is_storable_id(employee_id):
            return None
        row = self._execute(
            "SELECT * FROM employee WHERE id = ?",
            (employee_id,),
        ).fetchone()
        if not row:
            return None
        return Employee.from_row(row)

    def save(self, employee: Employee) -> Employee:
        """Insert or update ``employee``.

        Raises
        ------
        EmployeeNotFoundError
            If ``employee.id`` is nonzero and no such row exists.  Nothing
            is written in that case.
        """
        if employee.is_new:
            cursor = self._execute(
                "INSERT INTO employee (first_name, last_name, email) VALUES (?, ?, ?)",
                (employee.first_name, employee.last_name, employee.email),
            )
            employee.id = cursor.lastrowid
            logger.info("Created employee %s", employee.id)
            return employee

        if not _is_storable_id(employee.id):
            raise EmployeeNotFoundError(employee.id)
        cursor = self._execute(
            "UPDATE employee SET first_name = ?, last_name = ?, email = ? WHERE id = ?",
            (employee.first_name, employee.last_name, employee.email, employee.id),
        )
        if cursor.rowcount == 0:
            raise EmployeeNotFoundError(employee.id)
        logger.info("Updated employee %s", employee.id)
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        if not _is_storable_id(employee_id):
            return
        cursor = self._execute("DELETE FROM employee WHERE id = ?", (employee_id,))
        if cursor.rowcount:
            logger.info("Deleted employee %s", employee_id)

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        conn = self._db.current_connection()
        try:
            return conn.execute(sql, params)
        except sqlite3.Error as exc:
            logger.exception("Record store query failed")
            raise RecordStoreError(str(exc)) from exc
