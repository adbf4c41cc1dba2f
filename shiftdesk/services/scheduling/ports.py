"""
Interfaces the shift service depends on.

Local employee existence and remote employee display data are separate
capabilities backed by separate systems that may disagree or fail
independently, so they are separate ports.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .types import AssignOutcome, Employee, EmployeeDirectoryRecord, Shift


class ShiftRepository(ABC):

    @abstractmethod
    async def get_by_id(self, shift_id: int) -> Optional[Shift]:
        ...

    @abstractmethod
    async def list_all(self) -> list[Shift]:
        ...

    @abstractmethod
    async def create(self, shift: Shift) -> Shift:
        """Persist a new shift, ignoring ``shift.id``; return it with the stored id."""
        ...

    @abstractmethod
    async def list_by_employee(self, employee_id: int) -> list[Shift]:
        ...

    @abstractmethod
    async def assign_employee(self, shift_id: int, employee_id: int) -> AssignOutcome:
        """Set the shift's employee if it is still free and does not overlap."""
        ...


class EmployeeLookup(ABC):
    """Answers "does this employee exist for scheduling purposes"."""

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        ...


class EmployeeDirectory(ABC):
    """Answers "how should this employee be displayed"."""

    @abstractmethod
    async def fetch_by_id(self, employee_id: int, auth_token: Optional[str]) -> EmployeeDirectoryRecord:
        """Raise DirectoryUnavailableError on any failure."""
        ...
