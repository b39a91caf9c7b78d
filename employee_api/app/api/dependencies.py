"""Dependency injection helpers for the API routes.

Service instances are created once at start-up and stored on
``app.state``; these functions retrieve them for each request.
"""

from typing import Annotated

from fastapi import Depends, Request

from employee_api.app.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    """Return the ``EmployeeService`` stored on ``app.state``.

    Raises:
        RuntimeError: If the service is not initialized
    """
    service = getattr(request.app.state, "employee_service", None)
    if service is None:
        raise RuntimeError("EmployeeService not initialized. Check create_app setup.")
    return service


EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
