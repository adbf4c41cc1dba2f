from typing import Optional

from shiftdesk.db.models.employees import Employees
from shiftdesk.services.scheduling.ports import EmployeeLookup
from shiftdesk.services.scheduling.types import Employee

from .base import BaseStore


class EmployeeStore(BaseStore, EmployeeLookup):
    name = "employee"

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        async with self.session() as session:
            row = await session.get(Employees, employee_id)
            return Employee(id=row.id, name=row.name) if row else None
