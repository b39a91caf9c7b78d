"""Data access layer.

Services depend on the ``EmployeeRepository`` protocol rather than on a
concrete class; ``SQLiteEmployeeRepository`` is the implementation
wired in by the application.
"""

from .employee_repository import EmployeeRepository, SQLiteEmployeeRepository

__all__ = [
    "EmployeeRepository",
    "SQLiteEmployeeRepository",
]
