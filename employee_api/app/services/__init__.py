"""
Service layer abstraction.

Services wrap the repository in a transaction per call.  They depend
on the ``EmployeeRepository`` protocol, so tests can hand them any
implementation.
"""

from .employee_service import EmployeeService

__all__ = ["EmployeeService"]
