from __future__ import annotations

from typing import Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Sequence[Employee] = ()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def list_all(self) -> Sequence[Employee]:
        return sorted(self._by_id.values(), key=lambda e: e.name.lower())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def add(self, employee: Employee) -> Employee:
        self._by_id[employee.employee_id] = employee
        return employee

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        self._by_id[employee.employee_id] = employee
        return True

    def remove(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None
