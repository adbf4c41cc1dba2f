"""
Shift, employee and assignment values passed between the stores, the
directory client and ShiftService. Rows are converted into these on read.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Shift:
    id: int
    employee_id: Optional[int]
    start: datetime
    end: datetime

    @property
    def is_assigned(self) -> bool:
        return self.employee_id is not None

    def assigned_to(self, employee_id: int) -> "Shift":
        return replace(self, employee_id=employee_id)


@dataclass(frozen=True)
class Employee:
    id: int
    name: str


@dataclass(frozen=True)
class EmployeeDirectoryRecord:
    """Display data for an employee as returned by the remote directory."""
    name: str
    email: str

    def display(self) -> str:
        return f"{self.name} ({self.email})"


@dataclass(frozen=True)
class ShiftView:
    shift: Shift
    employee: Optional[str] = None  # "{name} ({email})" when assigned


class AssignOutcome(str, Enum):
    ASSIGNED = "ASSIGNED"
    ALREADY_ASSIGNED = "ALREADY_ASSIGNED"
    OVERLAP = "OVERLAP"
    SHIFT_MISSING = "SHIFT_MISSING"
