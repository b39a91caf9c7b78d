"""
Tests for the requests-based API client, run against the app in-process.
"""

import requests

from employee_api_client import EmployeeAPI


class InProcessSession:
    """Adapts a FastAPI ``TestClient`` to the ``requests.Session`` interface."""

    def __init__(self, test_client):
        self.test_client = test_client

    def request(self, method, url, json=None, headers=None, timeout=None):
        upstream = self.test_client.request(method, url, json=json, headers=headers)
        response = requests.Response()
        response.status_code = upstream.status_code
        response._content = upstream.content
        response.headers.update(upstream.headers)
        response.reason = upstream.reason_phrase
        response.url = url
        return response


class RefusingSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


def make_api(client):
    return EmployeeAPI(base_url="http://testserver/", session=InProcessSession(client))


def test_create_list_update_delete(client):
    api = make_api(client)

    created, error = api.create_employee("Ada", "Lovelace", "ada@x.com")
    assert error is None
    assert created["id"] > 0

    employees, error = api.list_employees()
    assert error is None
    assert employees == [created]

    updated, error = api.update_employee({**created, "email": "ada@lovelace.org"})
    assert error is None
    assert updated["email"] == "ada@lovelace.org"

    fetched, error = api.get_employee(created["id"])
    assert fetched == updated

    deleted, error = api.delete_employee(created["id"])
    assert deleted is True
    assert error is None


def test_not_found_is_reported_as_error(client):
    api = make_api(client)

    employee, error = api.get_employee(3)
    assert employee is None
    assert error == {"status_code": 404, "message": "Employee id not found - 3"}

    deleted, error = api.delete_employee(3)
    assert deleted is False
    assert error["status_code"] == 404


def test_network_failure_is_reported_as_error():
    api = EmployeeAPI(base_url="http://localhost:1", session=RefusingSession())

    employees, error = api.list_employees()
    assert employees == []
    assert error == {"status_code": None, "message": "connection refused"}
