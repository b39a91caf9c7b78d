"""Employee Directory API client.

A thin wrapper around the REST endpoints exposed under ``/api`` by
``employee_api.app.main``.  The client uses the ``requests`` library
and exposes one method per endpoint:

* :meth:`list_employees` – return all employees.
* :meth:`get_employee` – fetch a single employee by its identifier.
* :meth:`create_employee` – create a new employee.
* :meth:`update_employee` – update an existing employee.
* :meth:`delete_employee` – delete an employee.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  The client never raises for
HTTP or network errors.

Optional authentication via an API key is sent in the
``Authorization`` header when ``api_key`` is given.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeAPI:
    """Client for interacting with the Employee Directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
                The ``/api`` prefix is added by the client.
            api_key: Optional API key sent as ``Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to ``/api`` (e.g. ``/employees``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not isinstance(message, str):
                # 422 responses carry a list of validation errors
                message = str(message)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees."""
        data, error = self._request("GET", "/employees")
        if error:
            return [], error
        return data or [], None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single employee by ID."""
        return self._request("GET", f"/employees/{employee_id}")

    def create_employee(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee and return it with its assigned ``id``."""
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        return self._request("POST", "/employees", json_body=payload)

    def update_employee(self, employee: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update an employee.

        Args:
            employee: Full employee record including its ``id``.
        """
        return self._request("PUT", "/employees", json_body=employee)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(deleted, error)``.
        """
        _, error = self._request("DELETE", f"/employees/{employee_id}")
        if error:
            return False, error
        return True, None
