"""Exceptions raised by the service and repository layers."""


class EmployeeApiError(Exception):
    """Base exception for the Employee Directory API"""


class EmployeeNotFoundError(EmployeeApiError):
    """Raised when no employee exists for a given identifier"""

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee id not found - {employee_id}")


class RecordStoreError(EmployeeApiError):
    """Raised when the underlying record store fails"""
