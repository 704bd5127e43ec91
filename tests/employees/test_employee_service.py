from datetime import date

import pytest

from src.chronolog.chronolog.core.enums import Role
from src.chronolog.chronolog.core.exceptions import NotFoundError, ValidationError
from src.chronolog.chronolog.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.chronolog.chronolog.employees.service import EmployeeService


@pytest.fixture
def svc():
    return EmployeeService(InMemoryEmployeeRepository())


def test_add_and_get(svc):
    employee = svc.add(name="  Sandy ", email="sandy@example.com", role=Role.ADMIN)

    assert employee.name == "Sandy"
    assert employee.is_clocked_out
    assert svc.get(employee.employee_id) == employee


def test_add_requires_name(svc):
    with pytest.raises(ValidationError):
        svc.add(name=" ")


def test_leave_settings(svc):
    employee = svc.add(name="Hunter")

    updated = svc.update_leave_settings(employee.employee_id, hire_date=date(2024, 1, 1), manual_leave_adjustment=1.5)
    assert updated.hire_date == date(2024, 1, 1)
    assert updated.manual_leave_adjustment == 1.5

    with pytest.raises(ValidationError):
        svc.update_leave_settings(employee.employee_id, hire_date=date(2024, 1, 1), termination_date=date(2023, 1, 1))


def test_remove(svc):
    employee = svc.add(name="Bokara")
    svc.remove(employee.employee_id)

    with pytest.raises(NotFoundError):
        svc.get(employee.employee_id)
